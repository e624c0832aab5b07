from unittest import mock

from amlpublish.cli.bin import entry_point
from amlpublish.cli.services import delete_service, get_service, list_services
from tests.helpers import TEST_SERVICE_ID, TEST_SERVICES


def test_invoke_services(runner):
    result = runner.invoke(entry_point, ["services", "--help"])  # type: ignore
    assert result.exit_code == 0
    assert "list" in result.output
    assert "delete" in result.output


def test_invoke_services_list(runner, workspace):
    with mock.patch(
        "amlpublish.cli.services.init_workspace", return_value=workspace
    ):
        result = runner.invoke(list_services)  # type: ignore
    assert result.exception is None
    assert result.exit_code == 0
    for service in TEST_SERVICES:
        assert service["Id"] in result.output
        assert service["Name"] in result.output


def test_invoke_services_get(runner, workspace):
    with mock.patch(
        "amlpublish.cli.services.init_workspace", return_value=workspace
    ):
        result = runner.invoke(get_service, [TEST_SERVICE_ID])  # type: ignore
    assert result.exit_code == 0
    workspace.get_web_service.assert_called_once_with(TEST_SERVICE_ID)
    assert f"id: {TEST_SERVICE_ID}" in result.output
    assert "name: adder" in result.output


def test_invoke_services_delete(runner, workspace):
    with mock.patch(
        "amlpublish.cli.services.init_workspace", return_value=workspace
    ):
        result = runner.invoke(delete_service, [TEST_SERVICE_ID, "--yes"])  # type: ignore
    assert result.exit_code == 0
    workspace.delete_web_service.assert_called_once_with(TEST_SERVICE_ID)
    assert f"Deleted web service {TEST_SERVICE_ID}" in result.output


def test_invoke_services_delete_aborted(runner, workspace):
    with mock.patch(
        "amlpublish.cli.services.init_workspace", return_value=workspace
    ):
        result = runner.invoke(delete_service, [TEST_SERVICE_ID], input="n\n")  # type: ignore
    assert result.exit_code != 0
    workspace.delete_web_service.assert_not_called()
