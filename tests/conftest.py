"""Pytest shared fixtures for the HMRC client tests."""
import json
import pathlib
import sys
from types import SimpleNamespace

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests


def make_http_response(status_code=200, payload=None, body=None, url="https://test-api.service.hmrc.gov.uk/"):
    """Build a real requests.Response carrying a canned body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.reason = {200: "OK", 201: "Created", 400: "Bad Request", 401: "Unauthorized"}.get(status_code, "")
    resp.encoding = "utf-8"
    if body is None:
        body = json.dumps(payload) if payload is not None else ""
    resp._content = body.encode("utf-8")
    return resp


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting the HMRC sandbox.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(method, url, **kwargs):
        raise AssertionError(f"Unexpected network call: {method} {url}")

    monkeypatch.setattr(requests, "request", _refuse)


@pytest.fixture
def http_stub(monkeypatch):
    """Replace requests.request with a recorder returning a canned response.

    Set ``http_stub.response`` to change what the next call returns.
    """
    stub = SimpleNamespace(calls=[], response=make_http_response(201, {"userId": "945350439195"}))

    def fake_request(method, url, **kwargs):
        stub.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        stub.response.url = url
        return stub.response

    monkeypatch.setattr(requests, "request", fake_request)
    return stub


@pytest.fixture
def recording_client():
    """Stand-in for HmrcClient that records post_endpoint_json calls."""

    class _RecordingClient:
        def __init__(self):
            self.calls = []
            self.result = SimpleNamespace(is_success=True, data={"userId": "1"})

        def post_endpoint_json(self, endpoint, data, auth_type):
            self.calls.append(SimpleNamespace(endpoint=endpoint, data=data, auth_type=auth_type))
            return self.result

    return _RecordingClient()


@pytest.fixture(autouse=True)
def _clean_hmrc_env(monkeypatch, request):
    """Keep the developer's HMRC_* variables out of unit tests."""
    if request.node.get_closest_marker("integration"):
        return
    for var in ("HMRC_BASE_URL", "HMRC_API_VERSION", "HMRC_REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_response():
    """Expose make_http_response to test modules."""
    return make_http_response
