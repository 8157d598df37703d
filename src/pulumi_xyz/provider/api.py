"""
JSON-over-HTTP calls against the backend REST API.
"""

from typing import Any, Dict, Optional

import httpx

from pulumi_xyz.config.logging_config import get_logger
from pulumi_xyz.errors import ApiRequestError

log = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def send_request(
    method: str,
    url: str,
    body: Optional[Dict[str, Any]] = None,
    *,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Optional[Dict[str, Any]]:
    """
    Send a JSON request and decode the JSON response.

    Args:
        method: HTTP method (GET, POST, PATCH, DELETE)
        url: Absolute URL of the request
        body: JSON body, omitted when None
        token: Optional bearer token
        timeout: Request timeout in seconds
        transport: Custom httpx transport (tests use httpx.MockTransport)

    Returns:
        The decoded response object, or None for 204 No Content

    Raises:
        ApiRequestError: On transport errors, status codes >= 300 or invalid JSON
    """
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    log.debug("%s %s", method, url)
    try:
        with httpx.Client(
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            transport=transport,
        ) as client:
            response = client.request(method, url, headers=headers, json=body)
    except httpx.HTTPError as e:
        raise ApiRequestError(f"{method} {url} failed: {e}") from e

    if response.status_code >= 300:
        raise ApiRequestError(
            f"HTTP request failed with {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    if response.status_code == 204:
        return None

    try:
        return response.json()
    except ValueError as e:
        raise ApiRequestError(
            f"decoding JSON {response.text}",
            status_code=response.status_code,
            body=response.text,
        ) from e
