# tests/conftest.py
from pathlib import Path

import pytest
import requests

DATA_DIR = Path(__file__).parent / "data"


class KidToken:
    def __init__(self, kid=""):
        self._kid = kid

    def kid(self):
        return self._kid


class FakeResponse:
    """Stands in for a streamed requests.Response."""

    def __init__(self, status_code=200, body=b"", on_chunk=None):
        self.status_code = status_code
        self.body = body
        self.closed = False
        self._on_chunk = on_chunk

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            if self._on_chunk:
                self._on_chunk(i)
            yield self.body[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeHTTP:
    def __init__(self):
        self.routes = {}
        self.calls = []
        self.responses = []

    def route(self, url, status_code=200, body=b"", on_chunk=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[url] = (status_code, body, on_chunk)

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        status, body, on_chunk = self.routes.get(url, (404, b"not found", None))
        res = FakeResponse(status, body, on_chunk)
        self.responses.append(res)
        return res


@pytest.fixture
def sample_jwks_bytes():
    return (DATA_DIR / "sample_jwks.json").read_bytes()


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHTTP()
    monkeypatch.setattr(requests, "get", http.get)
    return http


@pytest.fixture
def token():
    return KidToken
