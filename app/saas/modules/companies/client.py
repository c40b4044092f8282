from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any


class CompaniesApiError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class CompaniesApiClient:
    """
    Thin JSON client for /api/companies.

    One request per call: no retries, no timeout-driven cancellation beyond the
    socket timeout, no deduplication.
    """

    base_url: str = "http://localhost:8080"
    timeout_seconds: int = 30

    def _send(self, method: str, path: str, body: bytes | None) -> tuple[int, bytes]:
        url = self.base_url.rstrip("/") + path
        req = urllib.request.Request(url, data=body, method=method)
        req.add_header("Accept", "application/json")
        if body is not None:
            req.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout_seconds) as resp:
                return resp.status, resp.read()
        except urllib.error.HTTPError as e:
            try:
                raw = e.read()
            except (http.client.HTTPException, OSError):
                raw = b""
            return e.code, raw

    def request_json(self, method: str, path: str, *, payload: dict[str, Any] | None = None) -> Any:
        body = json.dumps(payload).encode("utf-8") if payload is not None else None
        try:
            status, raw = self._send(method, path, body)
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise CompaniesApiError(f"{method} {path} failed: {e}") from e

        if not 200 <= status < 300:
            detail = ""
            try:
                detail = (json.loads(raw.decode("utf-8")) or {}).get("error") or ""
            except (ValueError, AttributeError):
                pass
            raise CompaniesApiError(f"HTTP {status} from {method} {path}: {detail or raw[:300]!r}", status_code=status)

        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise CompaniesApiError(f"Invalid JSON from {method} {path}", status_code=status) from e

    def _company(self, j: Any, method: str, path: str) -> dict[str, Any]:
        if not isinstance(j, dict) or "id" not in j:
            raise CompaniesApiError(f"Expected a company object from {method} {path}")
        return j

    def list_companies(self) -> list[dict[str, Any]]:
        j = self.request_json("GET", "/api/companies")
        if not isinstance(j, list) or not all(isinstance(c, dict) and "id" in c for c in j):
            raise CompaniesApiError("Expected a JSON array of companies")
        return j

    def create_company(self, *, name: str, description: str | None) -> dict[str, Any]:
        path = "/api/companies"
        j = self.request_json("POST", path, payload={"name": name, "description": description})
        return self._company(j, "POST", path)

    def update_company(self, company_id: str, *, name: str, description: str | None) -> dict[str, Any]:
        path = f"/api/companies/{urllib.parse.quote(str(company_id), safe='')}"
        j = self.request_json("PUT", path, payload={"name": name, "description": description})
        return self._company(j, "PUT", path)

    def delete_company(self, company_id: str) -> dict[str, Any]:
        path = f"/api/companies/{urllib.parse.quote(str(company_id), safe='')}"
        j = self.request_json("DELETE", path)
        if not isinstance(j, dict):
            raise CompaniesApiError(f"Expected an acknowledgement object from DELETE {path}")
        return j
