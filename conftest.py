import pytest

from amlpublish import Workspace
from amlpublish.constants import (
    API_ENDPOINT_ENV,
    AUTHORIZATION_TOKEN_ENV,
    MANAGEMENT_ENDPOINT_ENV,
    WORKSPACE_ID_ENV,
)
from tests.helpers import (
    TEST_AUTHORIZATION_TOKEN,
    TEST_MANAGEMENT_ENDPOINT,
    TEST_WORKSPACE_ID,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # local credentials must not leak into tests
    for name in (
        WORKSPACE_ID_ENV,
        AUTHORIZATION_TOKEN_ENV,
        API_ENDPOINT_ENV,
        MANAGEMENT_ENDPOINT_ENV,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def WORKSPACE():
    return Workspace(
        workspace_id=TEST_WORKSPACE_ID,
        authorization_token=TEST_AUTHORIZATION_TOKEN,
        management_endpoint=TEST_MANAGEMENT_ENDPOINT,
        config=None,
    )
