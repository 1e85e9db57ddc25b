import pytest
import requests

from job_search.errors import TransportError
from job_search.transports import http
from job_search.transports.http import HttpTransport


class FakeResponse:
    def __init__(self, status_code=200, body=None, json_error=None):
        self.status_code = status_code
        self._body = body
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._body


def _patch_post(monkeypatch, response=None, exc=None):
    calls = []

    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(http.requests, "post", fake_post)
    return calls


def test_posts_payload_with_api_key(monkeypatch):
    calls = _patch_post(monkeypatch, FakeResponse(body={"matchingJobs": []}))
    transport = HttpTransport(base_url="https://jobs.example.com/v2/", api_key="k-123", timeout=5)

    body = transport.execute({"query": {"query": "analyst"}})

    assert body == {"matchingJobs": []}
    url, kwargs = calls[0]
    assert url == "https://jobs.example.com/v2/jobs:search"
    assert kwargs["json"] == {"query": {"query": "analyst"}}
    assert kwargs["params"] == {"key": "k-123"}
    assert kwargs["timeout"] == 5
    assert "Authorization" not in kwargs["headers"]


def test_access_token_goes_in_bearer_header(monkeypatch):
    calls = _patch_post(monkeypatch, FakeResponse(body={}))
    HttpTransport(access_token="tok").execute({})

    _, kwargs = calls[0]
    assert kwargs["headers"]["Authorization"] == "Bearer tok"
    assert kwargs["params"] == {}


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failure(monkeypatch, status):
    _patch_post(monkeypatch, FakeResponse(status_code=status))

    with pytest.raises(TransportError) as excinfo:
        HttpTransport(api_key="bad").execute({})

    assert excinfo.value.status_code == status
    assert "Authentication failed" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, requests.HTTPError)
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_server_error(monkeypatch):
    _patch_post(monkeypatch, FakeResponse(status_code=503))

    with pytest.raises(TransportError) as excinfo:
        HttpTransport().execute({})

    assert excinfo.value.status_code == 503
    assert isinstance(excinfo.value.cause, requests.HTTPError)


def test_network_failure(monkeypatch):
    _patch_post(monkeypatch, exc=requests.ConnectionError("refused"))

    with pytest.raises(TransportError) as excinfo:
        HttpTransport().execute({})

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_invalid_json(monkeypatch):
    _patch_post(monkeypatch, FakeResponse(json_error=ValueError("Expecting value")))

    with pytest.raises(TransportError):
        HttpTransport().execute({})
