import importlib
import os
import sys

import click
from rich.console import Console
from rich.table import Column, Table

from amlpublish.cli.client import init_workspace
from amlpublish.constants import DEFAULT_PYTHON_VERSION, DEFAULT_RETRIES
from amlpublish.publish import publish_web_service


def _parse_schema(ctx, param, values):
    schema = {}
    for value in values:
        name, sep, type_name = value.partition("=")
        if not sep or not name or not type_name:
            raise click.BadParameter(f"expected NAME=TYPE, got '{value}'")
        schema[name] = type_name
    return schema or None


def load_function(target: str):
    """Imports ``package.module:function``, looking in the current directory first."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(
            f"expected MODULE:FUNCTION, got '{target}'", param_hint="TARGET"
        )
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attribute)
    except AttributeError:
        raise click.BadParameter(
            f"module '{module_name}' has no attribute '{attribute}'",
            param_hint="TARGET",
        ) from None


@click.command("publish")
@click.argument("target")
@click.option(
    "-i",
    "--input",
    "input_schema",
    multiple=True,
    callback=_parse_schema,
    help="Input NAME=TYPE, e.g. x=numeric. Repeat for every argument.",
)
@click.option(
    "-o",
    "--output",
    "output_schema",
    multiple=True,
    callback=_parse_schema,
    help="Output NAME=TYPE. Defaults to the function's return annotation.",
)
@click.option(
    "--data-frame", is_flag=True, help="The function takes a single data frame"
)
@click.option("--name", help="Name of the new web service")
@click.option("--service-id", help="ID of an existing web service to update")
@click.option(
    "-p",
    "--package",
    "packages",
    multiple=True,
    help="Requirement to install on the server. Inferred when omitted.",
)
@click.option(
    "--python-version",
    default=DEFAULT_PYTHON_VERSION,
    show_default=True,
    help="Python version of the web service runtime",
)
@click.option(
    "--retries",
    default=DEFAULT_RETRIES,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of tries before failing",
)
def publish(
    target,
    input_schema,
    output_schema,
    data_frame,
    name,
    service_id,
    packages,
    python_version,
    retries,
):
    """Publish the function TARGET (MODULE:FUNCTION) as a web service"""
    if input_schema is None:
        raise click.UsageError("At least one --input NAME=TYPE is required")
    fun = load_function(target)
    workspace = init_workspace()

    endpoints = publish_web_service(
        workspace,
        fun,
        name=name,
        input_schema=input_schema,
        output_schema=output_schema,
        data_frame=data_frame,
        packages=list(packages) or None,
        version=python_version,
        service_id=service_id,
        retries=retries,
    )

    table = Table(
        "Endpoint name",
        Column("API location", overflow="fold"),
        "Help location",
        title="Published endpoints",
        title_justify="left",
    )
    for endpoint in endpoints:
        table.add_row(
            endpoint.name, endpoint.api_location, endpoint.help_location
        )
    console = Console()
    console.print(table)
