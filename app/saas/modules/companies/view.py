"""
View-model for the companies screen.

Holds the form fields, the create/edit mode flags and a local cache of
companies keyed by id. The cache is only ever changed by the response of the
operation that was triggered; there is no refresh after the initial load.

Requests are issued one per action with no cancellation or ordering guard, so
a slow response may be applied after a newer one.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from app.saas.modules.companies.client import CompaniesApiClient, CompaniesApiError

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Success"
ERROR_TITLE = "Error"

MESSAGES = {
    "fetch_failed": "Failed to fetch companies",
    "create_ok": "Company created successfully",
    "create_failed": "Failed to create company",
    "update_ok": "Company updated successfully",
    "update_failed": "Failed to update company",
    "delete_ok": "Company deleted successfully",
    "delete_failed": "Failed to delete company",
    "name_required": "Name is required.",
}


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"  # "default" | "error"


class CompaniesView:
    def __init__(
        self,
        client: CompaniesApiClient,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self.client = client
        self.notifications: list[Notification] = []
        self._notify_hook = notify

        self._cache: dict[str, dict[str, Any]] = {}
        self.name = ""
        self.description = ""
        self.editing_company: str | None = None
        self.is_adding_new = False

    # ---------- State ----------
    @property
    def companies(self) -> list[dict[str, Any]]:
        items = list(self._cache.values())
        if items and all(c.get("createdAt") for c in items):
            # ISO-8601 strings from the API sort chronologically.
            return sorted(items, key=lambda c: c["createdAt"], reverse=True)
        return items

    def get(self, company_id: str) -> dict[str, Any] | None:
        return self._cache.get(company_id)

    @property
    def mode(self) -> str:
        if self.editing_company is not None:
            return "editing"
        if self.is_adding_new:
            return "adding"
        return "idle"

    def _notify(self, description: str, *, error: bool = False) -> None:
        n = Notification(
            title=ERROR_TITLE if error else SUCCESS_TITLE,
            description=description,
            variant="error" if error else "default",
        )
        self.notifications.append(n)
        if self._notify_hook is not None:
            self._notify_hook(n)

    def _clear_form(self) -> None:
        self.name = ""
        self.description = ""

    # ---------- Actions ----------
    def load(self) -> bool:
        try:
            companies = self.client.list_companies()
        except CompaniesApiError as e:
            logger.warning("List companies failed: %s", e)
            self._notify(MESSAGES["fetch_failed"], error=True)
            return False
        self._cache = {c["id"]: c for c in companies}
        return True

    def open_create(self) -> None:
        self.editing_company = None
        self._clear_form()
        self.is_adding_new = True

    def start_edit(self, company: dict[str, Any]) -> None:
        self.is_adding_new = False
        self.editing_company = company["id"]
        self.name = company.get("name") or ""
        self.description = company.get("description") or ""

    def cancel(self) -> None:
        self._clear_form()
        self.editing_company = None
        self.is_adding_new = False

    def submit(self) -> bool:
        """
        Create or update from the form. Values are sent exactly as typed, so an
        empty description is stored as "" rather than null.
        """
        name = self.name or ""
        if not name.strip():
            self._notify(MESSAGES["name_required"], error=True)
            return False
        description = self.description

        if self.editing_company is not None:
            return self._submit_update(self.editing_company, name, description)
        return self._submit_create(name, description)

    def _submit_create(self, name: str, description: str | None) -> bool:
        try:
            company = self.client.create_company(name=name, description=description)
        except CompaniesApiError as e:
            logger.warning("Create company failed: %s", e)
            self._notify(MESSAGES["create_failed"], error=True)
            return False
        self._cache[company["id"]] = company
        self._clear_form()
        self.is_adding_new = False
        self._notify(MESSAGES["create_ok"])
        return True

    def _submit_update(self, company_id: str, name: str, description: str | None) -> bool:
        try:
            company = self.client.update_company(company_id, name=name, description=description)
        except CompaniesApiError as e:
            logger.warning("Update company %s failed: %s", company_id, e)
            self._notify(MESSAGES["update_failed"], error=True)
            return False
        self._cache[company_id] = company
        self._clear_form()
        self.editing_company = None
        self._notify(MESSAGES["update_ok"])
        return True

    def delete(self, company_id: str) -> bool:
        try:
            self.client.delete_company(company_id)
        except CompaniesApiError as e:
            logger.warning("Delete company %s failed: %s", company_id, e)
            self._notify(MESSAGES["delete_failed"], error=True)
            return False
        self._cache.pop(company_id, None)
        if self.editing_company == company_id:
            self.cancel()
        self._notify(MESSAGES["delete_ok"])
        return True
