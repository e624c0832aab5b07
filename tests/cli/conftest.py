from unittest import mock

import pytest
from click.testing import CliRunner

from amlpublish.web_service import Endpoint, WebService
from tests.helpers import TEST_ENDPOINTS, TEST_SERVICES


@pytest.fixture
def runner():
    # wide enough that rich never folds ids or urls
    yield CliRunner(env={"COLUMNS": "250"})


@pytest.fixture
def workspace():
    workspace = mock.MagicMock()
    workspace.services = [WebService.from_dict(item) for item in TEST_SERVICES]
    workspace.get_web_service.return_value = WebService.from_dict(
        TEST_SERVICES[0]
    )
    workspace.endpoints.return_value = [
        Endpoint.from_dict(item) for item in TEST_ENDPOINTS
    ]
    yield workspace
