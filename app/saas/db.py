from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Generator

from flask import Flask, current_app, g
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

# Pool sizing only applies to server databases; sqlite gets SQLAlchemy's defaults.
_POSTGRES_POOL = {
    "pool_recycle": 1800,
    "pool_size": 5,
    "max_overflow": 10,
    "pool_timeout": 30,
}


def engine_options(db_url: str) -> dict[str, object]:
    opts: dict[str, object] = {"future": True, "pool_pre_ping": True}
    if db_url.startswith("postgres"):
        opts.update(_POSTGRES_POOL)
    return opts


def make_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        class_=Session,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


@contextmanager
def scoped_session(sm: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Commit on success, roll back on error, always close."""
    s = sm()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()


def init_db(app: Flask) -> Engine:
    db_url = app.config["DATABASE_URL"]
    engine = create_engine(db_url, **engine_options(db_url))
    if app.config.get("LOG_LEVEL") == "DEBUG":
        @event.listens_for(engine, "checkout")
        def _receive_checkout(dbapi_connection, connection_record, connection_proxy):  # type: ignore[no-redef]
            app.logger.debug("DB connection checkout from pool")
    app.extensions["sqlalchemy_engine"] = engine
    app.extensions["sqlalchemy_sessionmaker"] = make_sessionmaker(engine)
    return engine


def db_session(app: Flask | None = None) -> Session:
    """
    Request-scoped session, created on first use and closed at app-context teardown.
    """
    s: Session | None = getattr(g, "db_session", None)
    if s is None:
        sm = (app or current_app).extensions["sqlalchemy_sessionmaker"]
        s = g.db_session = sm()
    return s


def teardown_db_session(exc: BaseException | None) -> None:
    s: Session | None = g.pop("db_session", None)
    if s is None:
        return
    try:
        if exc is not None:
            s.rollback()
    finally:
        s.close()


def session_scope(app: Flask):
    """Non-request helper for scripts and tests."""
    return scoped_session(app.extensions["sqlalchemy_sessionmaker"])
