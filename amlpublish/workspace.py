import os
from typing import List, Optional

from .config import load_settings
from .connection import Connection
from .constants import (
    API_ENDPOINT_ENV,
    AUTHORIZATION_TOKEN_ENV,
    DEFAULT_API_ENDPOINT,
    DEFAULT_CONFIG_PATH,
    DEFAULT_MANAGEMENT_ENDPOINT,
    ENDPOINTS_PATH,
    MANAGEMENT_ENDPOINT_ENV,
    WEB_SERVICE_PATH,
    WEB_SERVICES_PATH,
    WORKSPACE_ID_ENV,
)
from .errors import NoAuthorizationToken, NoWorkspaceId
from .logger import logger
from .url_utils import sanitize_string_args
from .web_service import Endpoint, WebService


class Workspace:
    """Azure ML workspace, the target of published web services.

    Each setting is taken from the argument when given, then from its environment
    variable, then from the ``workspace`` section of the settings file.

    Parameters:
        workspace_id: The workspace ID, found under *Settings* in Azure ML Studio.
          Falls back to ``AZUREML_WORKSPACE_ID``.
        authorization_token: Primary or secondary workspace authorization token.
          Falls back to ``AZUREML_AUTHORIZATION_TOKEN``.
        api_endpoint: Studio API endpoint. Default is the global endpoint.
        management_endpoint: Management endpoint used to publish and list web
          services. Default is the global endpoint.
        config: Path to a JSON settings file. Default is ``~/.azureml/settings.json``.
    """

    def __init__(
        self,
        workspace_id: Optional[str] = None,
        authorization_token: Optional[str] = None,
        api_endpoint: Optional[str] = None,
        management_endpoint: Optional[str] = None,
        config: Optional[str] = DEFAULT_CONFIG_PATH,
    ):
        settings = load_settings(config)
        self.id = (
            workspace_id or os.environ.get(WORKSPACE_ID_ENV) or settings.id
        )
        if not self.id:
            raise NoWorkspaceId()
        self.authorization_token = (
            authorization_token
            or os.environ.get(AUTHORIZATION_TOKEN_ENV)
            or settings.authorization_token
        )
        if not self.authorization_token:
            raise NoAuthorizationToken()
        self.api_endpoint = (
            api_endpoint
            or os.environ.get(API_ENDPOINT_ENV)
            or settings.api_endpoint
            or DEFAULT_API_ENDPOINT
        )
        self.management_endpoint = (
            management_endpoint
            or os.environ.get(MANAGEMENT_ENDPOINT_ENV)
            or settings.management_endpoint
            or DEFAULT_MANAGEMENT_ENDPOINT
        )
        self.connection = Connection(
            self.authorization_token, self.management_endpoint
        )
        self._services: Optional[List[WebService]] = None

    def __repr__(self):
        return f"Workspace(id='{self.id}', api_endpoint='{self.api_endpoint}', management_endpoint='{self.management_endpoint}')"

    def __eq__(self, other):
        return (
            isinstance(other, Workspace)
            and self.id == other.id
            and self.authorization_token == other.authorization_token
            and self.management_endpoint == other.management_endpoint
        )

    @property
    def services(self) -> List[WebService]:
        """Web services of the workspace, fetched once and cached until :meth:`refresh`."""
        if self._services is None:
            self.refresh("services")
        return self._services  # type: ignore

    def refresh(self, what: str = "services") -> None:
        """Refreshes the cached workspace contents.

        Parameters:
            what: What to refresh. Only ``"services"`` is cached.
        """
        if what != "services":
            raise ValueError(f"Cannot refresh '{what}', expected 'services'")
        response = self.connection.get(
            WEB_SERVICES_PATH.format(workspace_id=self.id)
        )
        self._services = [
            WebService.from_dict(item) for item in response or []  # type: ignore
        ]
        logger.info(
            "Workspace %s has %d web services", self.id, len(self._services)
        )

    @sanitize_string_args
    def get_web_service(self, service_id: str) -> WebService:
        response = self.connection.get(
            WEB_SERVICE_PATH.format(workspace_id=self.id, service_id=service_id)
        )
        return WebService.from_dict(response)  # type: ignore

    @sanitize_string_args
    def endpoints(self, service_id: str) -> List[Endpoint]:
        """Lists the endpoints of a web service.

        Parameters:
            service_id: ID of the web service.

        Returns:
            The service's :class:`Endpoint` objects; ``api_location`` and
            ``primary_key`` are needed to call the service.
        """
        response = self.connection.get(
            ENDPOINTS_PATH.format(workspace_id=self.id, service_id=service_id)
        )
        return [Endpoint.from_dict(item) for item in response or []]  # type: ignore

    @sanitize_string_args
    def delete_web_service(self, service_id: str, refresh: bool = True):
        """Deletes a web service, then refreshes the service cache unless ``refresh`` is False."""
        response = self.connection.delete(
            WEB_SERVICE_PATH.format(
                workspace_id=self.id, service_id=service_id
            )
        )
        if refresh:
            self.refresh("services")
        return response

    def publish_web_service(self, fun, **kwargs) -> List[Endpoint]:
        """Publishes ``fun`` as a new web service. See :func:`amlpublish.publish.publish_web_service`."""
        from .publish import publish_web_service

        return publish_web_service(self, fun, **kwargs)

    def update_web_service(
        self, fun, service_id: str, **kwargs
    ) -> List[Endpoint]:
        """Replaces an existing web service. See :func:`amlpublish.publish.update_web_service`."""
        from .publish import update_web_service

        return update_web_service(self, fun, service_id, **kwargs)
