import os
import time
from typing import Optional

import requests

from .constants import DEFAULT_NETWORK_TIMEOUT_SEC, DEFAULT_RETRIES
from .errors import AzureMLAPIError, NoAuthorizationToken
from .logger import logger
from .retry_strategy import RetryStrategy


class Connection:
    """Wrapper of HTTP requests to an Azure ML control-plane endpoint."""

    def __init__(self, authorization_token: Optional[str], endpoint: str):
        if not authorization_token:
            raise NoAuthorizationToken()
        self.authorization_token = authorization_token
        self.endpoint = endpoint.rstrip("/")

    def __repr__(self):
        return f"Connection(endpoint='{self.endpoint}')"

    def __eq__(self, other):
        return (
            self.authorization_token == other.authorization_token
            and self.endpoint == other.endpoint
        )

    def delete(self, route: str, retries: int = DEFAULT_RETRIES):
        return self.make_request(
            None, route, requests_command=requests.delete, retries=retries
        )

    def get(self, route: str, retries: int = DEFAULT_RETRIES):
        return self.make_request(
            None, route, requests_command=requests.get, retries=retries
        )

    def put(self, payload: dict, route: str, retries: int = DEFAULT_RETRIES):
        return self.make_request(
            payload, route, requests_command=requests.put, retries=retries
        )

    def make_request(
        self,
        payload: Optional[dict],
        route: str,
        requests_command=requests.get,
        retries: int = DEFAULT_RETRIES,
    ):
        """
        Makes a request to the Azure ML endpoint, retrying transient failures.

        :param payload: JSON body, or None for requests without one
        :param route: route for the request, relative to the endpoint
        :param requests_command: requests.get, requests.put, requests.delete
        :param retries: total number of attempts before giving up
        :return: decoded JSON response, or None for an empty body
        """
        if retries < 1:
            raise ValueError(f"retries must be at least 1, got {retries}")
        endpoint = f"{self.endpoint}/{route}"

        logger.info("Make request to %s", endpoint)

        sleep_times = RetryStrategy.sleep_times(retries)
        while True:
            response = requests_command(
                endpoint,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.authorization_token}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=DEFAULT_NETWORK_TIMEOUT_SEC,
                verify=os.environ.get("AZUREML_SKIP_SSL_VERIFY", None) is None,
            )
            logger.info(
                "API request has response code %s", response.status_code
            )
            if (
                response.status_code not in RetryStrategy.statuses
                or not sleep_times
            ):
                break
            time.sleep(sleep_times.pop(0))

        if not response.ok:
            self.handle_bad_response(endpoint, requests_command, response)

        if not response.content:
            return None
        return response.json()

    def handle_bad_response(self, endpoint, requests_command, requests_response):
        raise AzureMLAPIError(endpoint, requests_command, requests_response)
