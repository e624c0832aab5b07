import click

from amlpublish.cli.endpoints import endpoints
from amlpublish.cli.publish import publish
from amlpublish.cli.services import services


@click.group("cli")
def entry_point():
    """amlpublish CLI

    `amlpublish` is a command line interface to publish Python functions as
    Azure Machine Learning web services and to inspect the published services.
    The workspace is read from AZUREML_WORKSPACE_ID and
    AZUREML_AUTHORIZATION_TOKEN, or from ~/.azureml/settings.json.
    """


entry_point.add_command(services)  # type: ignore
entry_point.add_command(endpoints)  # type: ignore
entry_point.add_command(publish)  # type: ignore

if __name__ == "__main__":
    entry_point()
