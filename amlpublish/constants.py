import os

DEFAULT_NETWORK_TIMEOUT_SEC = 120
DEFAULT_RETRIES = 3

DEFAULT_API_ENDPOINT = "https://studioapi.azureml.net"
DEFAULT_MANAGEMENT_ENDPOINT = "https://management.azureml.net"
DEFAULT_CONFIG_PATH = os.path.join("~", ".azureml", "settings.json")

WORKSPACE_ID_ENV = "AZUREML_WORKSPACE_ID"
AUTHORIZATION_TOKEN_ENV = "AZUREML_AUTHORIZATION_TOKEN"
API_ENDPOINT_ENV = "AZUREML_API_ENDPOINT"
MANAGEMENT_ENDPOINT_ENV = "AZUREML_MANAGEMENT_ENDPOINT"
SETTINGS_WORKSPACE_KEY = "workspace"

WEB_SERVICES_PATH = "workspaces/{workspace_id}/webservices"
WEB_SERVICE_PATH = WEB_SERVICES_PATH + "/{service_id}"
ENDPOINTS_PATH = WEB_SERVICE_PATH + "/endpoints"

CODE_SERVICE_TYPE = "Code"
LANGUAGE_FORMAT = "python-{version}-64"
DEFAULT_PYTHON_VERSION = "3.5"

BUNDLE_DIR = "src"
BUNDLE_ENV_FILE = "env.pkl"
BUNDLE_REQUIREMENTS_FILE = "requirements.txt"

ID_KEY = "Id"
DEFAULT_OUTPUT_NAME = "ans"
BUNDLE_ROOT = "Script Bundle"
