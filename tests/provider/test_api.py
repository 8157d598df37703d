import json

import httpx
import pytest

from pulumi_xyz.errors import ApiRequestError
from pulumi_xyz.provider.api import send_request


def _transport(handler):
    return httpx.MockTransport(handler)


def test_sends_json_body_and_token():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["headers"] = request.headers
        return httpx.Response(201, json={"id": 1, "title": "Buy milk"})

    result = send_request(
        "POST",
        "https://api.test/api/todos",
        {"title": "Buy milk"},
        token="secret",
        transport=_transport(handler),
    )

    assert result == {"id": 1, "title": "Buy milk"}
    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.test/api/todos"
    assert seen["body"] == {"title": "Buy milk"}
    assert seen["headers"]["content-type"] == "application/json"
    assert seen["headers"]["authorization"] == "Bearer secret"


def test_no_authorization_without_token():
    def handler(request: httpx.Request):
        assert "authorization" not in request.headers
        return httpx.Response(200, json={})

    assert send_request("GET", "https://api.test/api/todos/1", transport=_transport(handler)) == {}


def test_no_content_returns_none():
    def handler(request: httpx.Request):
        return httpx.Response(204)

    assert send_request("DELETE", "https://api.test/api/todos/1", transport=_transport(handler)) is None


@pytest.mark.parametrize("status", [300, 404, 500])
def test_error_status_raises(status):
    def handler(request: httpx.Request):
        return httpx.Response(status, text="nope")

    with pytest.raises(ApiRequestError) as exc_info:
        send_request("GET", "https://api.test/api/todos/1", transport=_transport(handler))

    assert exc_info.value.status_code == status
    assert exc_info.value.body == "nope"
    assert str(exc_info.value) == f"HTTP request failed with {status}: nope"


def test_invalid_json_raises():
    def handler(request: httpx.Request):
        return httpx.Response(200, text="<html>")

    with pytest.raises(ApiRequestError, match="decoding JSON <html>"):
        send_request("GET", "https://api.test/api/todos/1", transport=_transport(handler))


def test_transport_error_raises():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiRequestError, match="connection refused") as exc_info:
        send_request("GET", "https://api.test/api/todos/1", transport=_transport(handler))

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
