import base64
import io
import json
import zipfile

import requests

TEST_WORKSPACE_ID = "0123456789abcdef0123456789abcdef"
TEST_AUTHORIZATION_TOKEN = "test-authorization-token"
TEST_MANAGEMENT_ENDPOINT = "https://management.test.azureml.net"
TEST_SERVICE_ID = "fedcba9876543210fedcba9876543210"

TEST_SERVICES = [
    {
        "Id": TEST_SERVICE_ID,
        "Name": "adder",
        "Description": "",
        "CreationTime": "2016-03-01T10:00:00.000Z",
        "WorkspaceId": TEST_WORKSPACE_ID,
        "DefaultEndpointName": "default",
    },
    {
        "Id": "00000000000000000000000000000001",
        "Name": "scaler",
        "Description": "scales things",
        "CreationTime": "2016-03-02T10:00:00.000Z",
        "WorkspaceId": TEST_WORKSPACE_ID,
        "DefaultEndpointName": "default",
        "SomethingNew": True,
    },
]

TEST_ENDPOINTS = [
    {
        "Name": "default",
        "Description": "",
        "CreationTime": "2016-03-01T10:00:00.000Z",
        "WorkspaceId": TEST_WORKSPACE_ID,
        "WebServiceId": TEST_SERVICE_ID,
        "HelpLocation": "https://studio.azureml.net/apihelp/workspaces/ws/webservices/ws/endpoints/default",
        "PrimaryKey": "primary-key",
        "SecondaryKey": "secondary-key",
        "ApiLocation": "https://ussouthcentral.services.azureml.net/workspaces/ws/services/default",
        "Version": "2014-09-01",
        "MaxConcurrentCalls": 4,
        "DiagnosticsTraceLevel": "None",
        "ThrottleLevel": "Low",
    }
]


def make_response(status_code=200, body=None, text=None, reason=None):
    """A real requests.Response with the given status and JSON body (or raw text)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason or ("OK" if status_code < 400 else "Bad Request")
    if text is None:
        text = "" if body is None else json.dumps(body)
    response._content = text.encode("utf-8")  # pylint: disable=protected-access
    response.encoding = "utf-8"
    return response


def fake_get(url, **kwargs):
    if url.endswith("/endpoints"):
        return make_response(200, TEST_ENDPOINTS)
    if url.endswith("/webservices"):
        return make_response(200, TEST_SERVICES)
    return make_response(200, TEST_SERVICES[0])


def read_bundle(zip_contents):
    """Unpacks a base64 ZipContents string into {archive name: bytes}."""
    with zipfile.ZipFile(io.BytesIO(base64.b64decode(zip_contents))) as archive:
        return {name: archive.read(name) for name in archive.namelist()}
