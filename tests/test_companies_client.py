"""Tests for CompaniesApiClient request/response handling over urllib."""
import http.client
import io
import json
import urllib.error
import urllib.request

import pytest

from app.saas.modules.companies.client import CompaniesApiClient, CompaniesApiError


class _FakeResponse:
    def __init__(self, status: int, payload: bytes) -> None:
        self.status = status
        self._payload = payload

    def read(self) -> bytes:
        return self._payload

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture()
def captured(monkeypatch):
    calls = []

    def install(status=200, payload=b"[]", exc=None):
        def fake_urlopen(req, timeout=None):
            calls.append({"req": req, "timeout": timeout})
            if exc is not None:
                raise exc
            return _FakeResponse(status, payload)

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        return calls

    return install


def test_list_builds_get_request(captured):
    calls = captured(payload=b'[{"id": "a", "name": "Acme", "description": null}]')
    client = CompaniesApiClient(base_url="http://example.test/", timeout_seconds=5)

    result = client.list_companies()

    assert result == [{"id": "a", "name": "Acme", "description": None}]
    req = calls[0]["req"]
    assert req.get_method() == "GET"
    assert req.full_url == "http://example.test/api/companies"
    assert req.data is None
    assert calls[0]["timeout"] == 5


def test_create_sends_json_body(captured):
    calls = captured(payload=b'{"id": "a", "name": "Acme", "description": "Widgets"}')
    CompaniesApiClient(base_url="http://example.test").create_company(name="Acme", description="Widgets")

    req = calls[0]["req"]
    assert req.get_method() == "POST"
    assert json.loads(req.data) == {"name": "Acme", "description": "Widgets"}
    assert req.get_header("Content-type") == "application/json"


def test_update_and_delete_quote_id(captured):
    calls = captured(payload=b'{"id": "a/b", "success": true}')
    client = CompaniesApiClient(base_url="http://example.test")

    client.update_company("a/b", name="X", description=None)
    client.delete_company("a/b")

    assert calls[0]["req"].get_method() == "PUT"
    assert calls[0]["req"].full_url == "http://example.test/api/companies/a%2Fb"
    assert json.loads(calls[0]["req"].data) == {"name": "X", "description": None}
    assert calls[1]["req"].get_method() == "DELETE"
    assert calls[1]["req"].full_url == "http://example.test/api/companies/a%2Fb"


def test_http_error_becomes_api_error_with_status(captured):
    err = urllib.error.HTTPError(
        "http://example.test/api/companies/x",
        500,
        "Internal Server Error",
        {},
        io.BytesIO(b'{"error": "Failed to delete company"}'),
    )
    captured(exc=err)

    with pytest.raises(CompaniesApiError) as exc:
        CompaniesApiClient(base_url="http://example.test").delete_company("x")
    assert exc.value.status_code == 500
    assert "Failed to delete company" in str(exc.value)


def test_connection_failure_becomes_api_error(captured):
    captured(exc=urllib.error.URLError("connection refused"))

    with pytest.raises(CompaniesApiError) as exc:
        CompaniesApiClient(base_url="http://example.test").list_companies()
    assert exc.value.status_code is None


def test_invalid_json_becomes_api_error(captured):
    captured(payload=b"<html>oops</html>")

    with pytest.raises(CompaniesApiError, match="Invalid JSON"):
        CompaniesApiClient(base_url="http://example.test").list_companies()


def test_list_rejects_non_array(captured):
    captured(payload=b'{"error": "nope"}')

    with pytest.raises(CompaniesApiError):
        CompaniesApiClient(base_url="http://example.test").list_companies()


def test_truncated_response_becomes_api_error(monkeypatch):
    class _Truncated(_FakeResponse):
        def read(self) -> bytes:
            raise http.client.IncompleteRead(b'[{"id": "a"', 20)

    monkeypatch.setattr(urllib.request, "urlopen", lambda req, timeout=None: _Truncated(200, b""))

    with pytest.raises(CompaniesApiError):
        CompaniesApiClient(base_url="http://example.test").list_companies()


def test_bad_status_line_becomes_api_error(captured):
    captured(exc=http.client.BadStatusLine("garbage"))

    with pytest.raises(CompaniesApiError):
        CompaniesApiClient(base_url="http://example.test").delete_company("a")


@pytest.mark.parametrize("payload", [b"[]", b'"ok"', b"null", b'{"name": "no id"}'])
def test_create_and_update_reject_non_company_bodies(captured, payload):
    captured(payload=payload)
    client = CompaniesApiClient(base_url="http://example.test")

    with pytest.raises(CompaniesApiError):
        client.create_company(name="Acme", description=None)
    with pytest.raises(CompaniesApiError):
        client.update_company("a", name="Acme", description=None)


def test_delete_rejects_non_object_body(captured):
    captured(payload=b"[]")

    with pytest.raises(CompaniesApiError):
        CompaniesApiClient(base_url="http://example.test").delete_company("a")
