import click
from rich.console import Console
from rich.table import Column, Table

from amlpublish.cli.client import init_workspace


@click.group("services")
def services():
    """Services is a wrapper around the web services of a workspace"""
    pass


@services.command("list")
def list_services():
    """List all web services of the workspace"""
    workspace = init_workspace()

    table = Table(
        Column("Service Id", overflow="fold", min_width=32),
        "Name",
        "Creation time",
        "Default endpoint",
        title="Web services",
        title_justify="left",
    )

    for web_service in workspace.services:
        table.add_row(
            web_service.id,
            web_service.name,
            web_service.creation_time,
            web_service.default_endpoint_name,
        )
    console = Console()
    console.print(table)


@services.command("get")
@click.argument("service_id")
def get_service(service_id):
    """Print web service info"""
    workspace = init_workspace()

    web_service = workspace.get_web_service(service_id)

    console = Console()
    console.print(f"id: {web_service.id}")
    console.print(f"name: {web_service.name}")
    console.print(f"description: {web_service.description}")
    console.print(f"creation_time: {web_service.creation_time}")
    console.print(f"default_endpoint_name: {web_service.default_endpoint_name}")


@services.command("delete")
@click.argument("service_id")
@click.confirmation_option(prompt="Delete this web service?")
def delete_service(service_id):
    """Delete a web service"""
    workspace = init_workspace()

    console = Console()
    workspace.delete_web_service(service_id)
    console.print(f"Deleted web service {service_id}")
