"""
JSON endpoints for companies.

Every failure is reported with one fixed message per operation and status
500; unknown ids are not distinguished from store errors.
"""
from __future__ import annotations

from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import RequestEntityTooLarge

from app.saas.db import db_session
from app.saas.modules.companies.service import (
    CompanyNotFound,
    create_company,
    delete_company,
    list_companies,
    update_company,
)

bp = Blueprint("companies_api", __name__)

FETCH_FAILED = "Failed to fetch companies"
CREATE_FAILED = "Failed to create company"
UPDATE_FAILED = "Failed to update company"
DELETE_FAILED = "Failed to delete company"


class InvalidPayload(ValueError):
    pass


def _json_payload() -> dict:
    try:
        payload = request.get_json(silent=True)
    except RequestEntityTooLarge as e:
        raise InvalidPayload("Request body exceeds MAX_CONTENT_LENGTH") from e
    if not isinstance(payload, dict):
        raise InvalidPayload("Request body must be a JSON object")
    return payload


def _failure(message: str, exc: Exception):
    s = db_session()
    s.rollback()
    current_app.logger.warning(
        "%s (request_id=%s): %s: %s",
        message,
        getattr(g, "request_id", None),
        type(exc).__name__,
        exc,
    )
    return jsonify({"error": message}), 500


@bp.get("/companies")
def companies_list():
    s = db_session()
    try:
        companies = list_companies(s)
    except SQLAlchemyError as e:
        return _failure(FETCH_FAILED, e)
    return jsonify([c.to_dict() for c in companies])


@bp.post("/companies")
def companies_create():
    s = db_session()
    try:
        company = create_company(s, _json_payload())
        s.commit()
    except (InvalidPayload, SQLAlchemyError) as e:
        return _failure(CREATE_FAILED, e)
    return jsonify(company.to_dict())


@bp.put("/companies/<company_id>")
def companies_update(company_id: str):
    s = db_session()
    try:
        company = update_company(s, company_id, _json_payload())
        s.commit()
    except (InvalidPayload, CompanyNotFound, SQLAlchemyError) as e:
        return _failure(UPDATE_FAILED, e)
    return jsonify(company.to_dict())


@bp.delete("/companies/<company_id>")
def companies_delete(company_id: str):
    s = db_session()
    try:
        delete_company(s, company_id)
        s.commit()
    except (CompanyNotFound, SQLAlchemyError) as e:
        return _failure(DELETE_FAILED, e)
    return jsonify({"success": True})
