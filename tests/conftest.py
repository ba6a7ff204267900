"""Shared fakes for transport tests."""

import json

import pytest


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text=None, headers=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload if payload is not None else {})
        self.headers = headers or {}


class FakeSession:
    """Records calls the way a requests.Session would receive them."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def _handle(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._handle("GET", url, kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, kwargs)


class FakeAsyncResponse:
    def __init__(self, status=200, payload=None, text=None, headers=None, body=None):
        self.status = status
        if body is None:
            text = text if text is not None else json.dumps(payload if payload is not None else {})
            body = text.encode("utf-8")
        self._body = body
        self.headers = headers or {}

    async def read(self):
        return self._body

    async def text(self):
        return self._body.decode("utf-8")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeAsyncSession:
    """Records calls the way an aiohttp.ClientSession would receive them."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeAsyncResponse()
        self.error = error
        self.calls = []

    def _handle(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._handle("GET", url, kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, kwargs)


class RecordingTransport:
    """Captures requests instead of sending them."""

    def __init__(self):
        self.sent = []

    def send(self, request, success=None, failure=None):
        self.sent.append(request)
        if success is not None:
            success({"path": request.path})
        return request


@pytest.fixture
def credentials():
    return {
        "api_key": "test_key",
        "api_secret": "test_secret",
        "access_token": "test_token",
        "access_secret": "test_access_secret",
    }
