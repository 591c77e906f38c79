# =============================================================================
# File: accountdemo/db.py
# Purpose: SQLAlchemy engine + session factory, schema upgrade via Alembic.
# =============================================================================
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings, is_memory_url

log = logging.getLogger(__name__)

# Alembic scripts ship inside the package
MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass


def _unicode_upper(value):
    return value.upper() if isinstance(value, str) else value


def _attach_target(url, schema: str) -> str:
    if is_memory_url(url):
        return ":memory:"
    db = Path((url.database or "").removeprefix("file:"))
    return str(db.with_name(f"{db.stem}_{schema}.db"))


def make_engine(settings: Settings) -> Engine:
    """Create the engine described by ``settings``.

    SQLite has no schemas, so a database is attached under the schema name
    on every new connection. Its built-in upper() only folds ASCII, so it is
    replaced by a Unicode-aware one. In-memory databases share one
    connection (StaticPool), which cli.serve() runs single-threaded.
    """
    url = make_url(settings.url)
    kwargs = {"echo": settings.echo_sql, "future": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if is_memory_url(settings.url):
            kwargs["poolclass"] = StaticPool
    elif settings.username and url.username is None:
        url = url.set(username=settings.username, password=settings.password)

    engine = create_engine(url, **kwargs)

    if url.get_backend_name() == "sqlite":
        target = _attach_target(url, settings.schema)

        @event.listens_for(engine, "connect")
        def _prepare_sqlite(dbapi_connection, connection_record):
            dbapi_connection.create_function("upper", 1, _unicode_upper, deterministic=True)
            cursor = dbapi_connection.cursor()
            cursor.execute(f"ATTACH DATABASE ? AS {settings.schema}", (target,))
            cursor.close()

    log.info("DataSource is %s (%s)", engine.url.render_as_string(), type(engine.pool).__name__)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def alembic_config() -> AlembicConfig:
    cfg = AlembicConfig()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg


def init_db(engine: Engine) -> None:
    """Bring the schema up to date by running every Alembic migration."""
    # Import models so metadata sees them (autogenerate / env.py)
    from . import models  # noqa: F401

    cfg = alembic_config()
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, "head")
    log.info("Database schema is up to date")
