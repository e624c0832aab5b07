"""Publish Python functions as Azure Machine Learning web services."""

__all__ = [
    "AzureMLAPIError",
    "Endpoint",
    "NoAuthorizationToken",
    "NoWorkspaceId",
    "SchemaError",
    "WebService",
    "Workspace",
    "azure_schema",
    "infer_schema",
    "publish_web_service",
    "update_web_service",
]

from ._metadata import __version__
from .errors import (
    AzureMLAPIError,
    NoAuthorizationToken,
    NoWorkspaceId,
    SchemaError,
)
from .publish import publish_web_service, update_web_service
from .schema import azure_schema, infer_schema
from .web_service import Endpoint, WebService
from .workspace import Workspace
