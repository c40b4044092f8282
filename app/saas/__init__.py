import logging
import uuid

from flask import Flask, g, jsonify, render_template, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from app.saas.config import load_config
from app.saas.db import init_db, teardown_db_session
from app.saas.models import Base  # noqa: F401  (registers tables on Base.metadata)
from app.saas.routes import bp as routes_bp
from app.saas.modules.companies.api import bp as companies_api_bp
from app.saas.modules.companies.pages import bp as companies_pages_bp


def _is_api_request() -> bool:
    return request.path.startswith("/api/")


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_mapping(load_config())
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("DATABASE_URL") or str(app.config["DATABASE_URL"]).strip() == "":
            raise RuntimeError("DATABASE_URL is required in production.")
        if str(app.config["DATABASE_URL"]).startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    init_db(app)

    def _dispose_engine_on_fork() -> None:
        import os
        if hasattr(os, "register_at_fork"):
            def _after_fork_child():
                engine = app.extensions.get("sqlalchemy_engine")
                if engine:
                    engine.dispose()
                    app.logger.info("Disposed DB engine after fork (pid=%s)", os.getpid())

            os.register_at_fork(after_in_child=_after_fork_child)

    _dispose_engine_on_fork()

    app.register_blueprint(routes_bp)
    app.register_blueprint(companies_api_bp, url_prefix="/api")
    app.register_blueprint(companies_pages_bp, url_prefix="/app")

    @app.before_request
    def _assign_request_id():
        # Per-request id for log correlation.
        g.request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex

    app.teardown_appcontext(teardown_db_session)

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        if _is_api_request():
            return jsonify({"error": "Not found"}), 404
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        rid = getattr(g, "request_id", None)
        app.logger.exception("Unhandled 500 (request_id=%s)", rid)
        if _is_api_request():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("errors/500.html"), 500

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):  # type: ignore[no-redef]
        if _is_api_request():
            return jsonify({"error": e.description or e.name}), e.code
        return e

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
