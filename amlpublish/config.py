import json
import os
from typing import Optional

from .constants import SETTINGS_WORKSPACE_KEY
from .pydantic_base import ImmutableModel


class WorkspaceSettings(ImmutableModel):
    """``workspace`` section of an Azure ML settings file, e.g. ``~/.azureml/settings.json``::

        {"workspace": {
            "id": "...",
            "authorization_token": "...",
            "api_endpoint": "https://studioapi.azureml.net",
            "management_endpoint": "https://management.azureml.net"
        }}
    """

    id: Optional[str] = None
    authorization_token: Optional[str] = None
    api_endpoint: Optional[str] = None
    management_endpoint: Optional[str] = None


def load_settings(path: Optional[str]) -> WorkspaceSettings:
    """Reads workspace settings from ``path``. A missing file yields empty settings."""
    if path is None:
        return WorkspaceSettings()
    path = os.path.expanduser(path)
    if not os.path.exists(path):
        return WorkspaceSettings()
    with open(path, "r", encoding="utf-8") as settings_f:
        settings = json.load(settings_f)
    return WorkspaceSettings.parse_obj(settings.get(SETTINGS_WORKSPACE_KEY, {}))
