from ._metadata import __version__

from .constants import AUTHORIZATION_TOKEN_ENV, WORKSPACE_ID_ENV
from .retry_strategy import RetryStrategy


class AzureMLAPIError(Exception):
    def __init__(self, endpoint, command, requests_response):
        command_name = getattr(command, "__name__", str(command))
        self.status_code = requests_response.status_code
        self.text = requests_response.text
        self.message = (
            f"Tried to {command_name} {endpoint}, but received "
            f"{requests_response.status_code}: {requests_response.reason}."
        )
        if self.text:
            self.message += f"\nThe detailed error is:\n{self.text}"
        if self.status_code in RetryStrategy.statuses:
            self.message += (
                "\nThis likely indicates temporary downtime of the service, "
                "please try again in a minute or two"
            )
        self.message += f"\n(amlpublish client version {__version__})"
        super().__init__(self.message)


class NoWorkspaceId(Exception):
    def __init__(
        self,
        message=f"You need to pass a workspace id to the Workspace or set the environment variable {WORKSPACE_ID_ENV}",
    ):
        self.message = message
        super().__init__(self.message)


class NoAuthorizationToken(Exception):
    def __init__(
        self,
        message=f"You need to pass an authorization token to the Workspace or set the environment variable {AUTHORIZATION_TOKEN_ENV}",
    ):
        self.message = message
        super().__init__(self.message)


class SchemaError(ValueError):
    def __init__(self, message="Could not determine the web service schema"):
        self.message = message
        super().__init__(self.message)
