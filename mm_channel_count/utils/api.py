"""HTTP client for the Mattermost API."""

import logging

import httpx

from ..exceptions import ApiError
from ..models import Connection
from .const import API_PREFIX, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def get_client(connection: Connection) -> httpx.Client:
    """Create an authenticated HTTP client for the server."""
    return httpx.Client(
        base_url=connection.base_url,
        headers={"Authorization": f"Bearer {connection.token}"},
        timeout=REQUEST_TIMEOUT,
    )


def classify_response(response: httpx.Response, operation: str):
    """Return the decoded body of a successful response, raise ApiError otherwise."""
    if response.status_code != 200:
        raise ApiError(
            operation,
            f"HTTP {response.status_code}",
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as e:
        raise ApiError(operation, "malformed response", status_code=response.status_code) from e


def call_api(client: httpx.Client, operation: str, path: str, params: dict = None):
    """GET an API v4 path and return the decoded JSON body."""
    logger.debug(f"{operation}: GET {API_PREFIX}{path}")
    try:
        response = client.get(f"{API_PREFIX}{path}", params=params or {})
    except httpx.HTTPError as e:
        raise ApiError(operation, str(e) or type(e).__name__) from e
    return classify_response(response, operation)


def expect_record(data, operation: str, required=()) -> dict:
    """Check a decoded body is a JSON object holding the required keys."""
    if not isinstance(data, dict) or any(key not in data for key in required):
        raise ApiError(operation, "malformed response")
    return data


def expect_records(data, operation: str) -> list:
    """Check a decoded body is a JSON array of objects."""
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ApiError(operation, "malformed response")
    return data
