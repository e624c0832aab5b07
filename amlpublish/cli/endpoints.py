import click
from rich.console import Console
from rich.table import Column, Table

from amlpublish.cli.client import init_workspace


@click.group("endpoints")
def endpoints():
    """Endpoints is a wrapper around the endpoints of a web service"""
    pass


@endpoints.command("list")
@click.argument("service_id")
@click.option(
    "--show-keys", is_flag=True, help="Print the endpoints' primary keys"
)
def list_endpoints(service_id, show_keys):
    """List the endpoints of a web service"""
    workspace = init_workspace()

    table = Table(
        "Endpoint name",
        Column("API location", overflow="fold"),
        "Help location",
        title=f"Endpoints of {service_id}",
        title_justify="left",
    )
    if show_keys:
        table.add_column("Primary key", overflow="fold")

    for endpoint in workspace.endpoints(service_id):
        row = [endpoint.name, endpoint.api_location, endpoint.help_location]
        if show_keys:
            row.append(endpoint.primary_key)
        table.add_row(*row)
    console = Console()
    console.print(table)
