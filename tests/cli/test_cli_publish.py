from unittest import mock

import pytest

from amlpublish.cli.publish import publish
from tests.helpers import TEST_ENDPOINTS, TEST_SERVICE_ID

MODULE_SOURCE = '''
def add(x, y):
    return x + y
'''


@pytest.fixture
def user_module(tmp_path, monkeypatch):
    (tmp_path / "cli_user_functions.py").write_text(MODULE_SOURCE)
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    yield "cli_user_functions"


@pytest.fixture
def publish_mock(workspace):
    with mock.patch(
        "amlpublish.cli.publish.init_workspace", return_value=workspace
    ), mock.patch(
        "amlpublish.cli.publish.publish_web_service",
        return_value=workspace.endpoints.return_value,
    ) as publish_web_service:
        yield publish_web_service


def test_invoke_publish(runner, workspace, user_module, publish_mock):
    result = runner.invoke(  # type: ignore
        publish,
        [
            f"{user_module}:add",
            "-i",
            "x=numeric",
            "-i",
            "y=numeric",
            "-o",
            "ans=numeric",
            "--name",
            "adder",
            "-p",
            "numpy==1.26.4",
        ],
    )
    assert result.exception is None
    assert result.exit_code == 0
    args, kwargs = publish_mock.call_args
    assert args[0] is workspace
    assert args[1].__name__ == "add"
    assert kwargs["input_schema"] == {"x": "numeric", "y": "numeric"}
    assert kwargs["output_schema"] == {"ans": "numeric"}
    assert kwargs["name"] == "adder"
    assert kwargs["packages"] == ["numpy==1.26.4"]
    assert kwargs["service_id"] is None
    assert kwargs["data_frame"] is False
    assert TEST_ENDPOINTS[0]["ApiLocation"] in result.output


def test_invoke_publish_update(runner, user_module, publish_mock):
    result = runner.invoke(  # type: ignore
        publish,
        [f"{user_module}:add", "-i", "x=numeric", "--service-id", TEST_SERVICE_ID],
    )
    assert result.exit_code == 0
    kwargs = publish_mock.call_args.kwargs
    assert kwargs["service_id"] == TEST_SERVICE_ID
    assert kwargs["output_schema"] is None
    assert kwargs["packages"] is None


def test_invoke_publish_requires_input(runner, user_module, publish_mock):
    result = runner.invoke(publish, [f"{user_module}:add"])  # type: ignore
    assert result.exit_code == 2
    publish_mock.assert_not_called()


@pytest.mark.parametrize(
    "arguments",
    [
        ["{module}:add", "-i", "x"],
        ["{module}:add", "-i", "=numeric"],
        ["{module}", "-i", "x=numeric"],
        ["{module}:missing", "-i", "x=numeric"],
        ["{module}:add", "-i", "x=numeric", "--retries", "0"],
    ],
)
def test_invoke_publish_bad_parameters(runner, user_module, publish_mock, arguments):
    arguments = [argument.format(module=user_module) for argument in arguments]
    result = runner.invoke(publish, arguments)  # type: ignore
    assert result.exit_code == 2
    publish_mock.assert_not_called()
