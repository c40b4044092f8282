from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from app.saas.modules.companies.models import Company

logger = logging.getLogger(__name__)


class CompanyNotFound(LookupError):
    """Raised when no Company row matches the requested id."""

    def __init__(self, company_id: str) -> None:
        super().__init__(f"Company {company_id!r} not found")
        self.company_id = company_id


def list_companies(s: "Session") -> list["Company"]:
    """All companies, newest first."""
    from app.saas.modules.companies.models import Company

    return s.query(Company).order_by(Company.created_at.desc()).all()


def get_company(s: "Session", company_id: str) -> "Company":
    from app.saas.modules.companies.models import Company

    company = s.get(Company, company_id)
    if company is None:
        raise CompanyNotFound(company_id)
    return company


def create_company(s: "Session", payload: dict) -> "Company":
    """
    Create a new company from {name, description}.

    `name` is passed through as given; the NOT NULL column is the only check,
    so a missing name fails at flush time with an IntegrityError.
    """
    from app.saas.modules.companies.models import Company

    company = Company(
        name=payload.get("name"),
        description=payload.get("description"),
    )
    s.add(company)
    s.flush()
    logger.info("Created company id=%s", company.id)
    return company


def update_company(s: "Session", company_id: str, payload: dict) -> "Company":
    """Overwrite name/description on an existing company. Last write wins."""
    company = get_company(s, company_id)
    company.name = payload.get("name")
    company.description = payload.get("description")
    s.flush()
    logger.info("Updated company id=%s", company.id)
    return company


def delete_company(s: "Session", company_id: str) -> None:
    company = get_company(s, company_id)
    s.delete(company)
    s.flush()
    logger.info("Deleted company id=%s", company_id)
