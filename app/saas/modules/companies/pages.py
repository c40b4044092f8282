from flask import Blueprint, render_template

bp = Blueprint("companies_pages", __name__)


@bp.get("/companies")
def companies_page():
    """Shell page; the list and form are driven from the browser through /api/companies."""
    return render_template("companies/index.html")
