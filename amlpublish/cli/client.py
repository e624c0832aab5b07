import functools

from amlpublish.workspace import Workspace


@functools.lru_cache()
def init_workspace() -> Workspace:
    """Workspace configured by AZUREML_* environment variables or ~/.azureml/settings.json."""
    return Workspace()
