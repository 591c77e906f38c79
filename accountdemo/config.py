# =============================================================================
# File: accountdemo/config.py
# Purpose: Immutable application settings (.env / environment + command line).
# =============================================================================
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .connection import (
    DEFAULT_DATABASE_NAME,
    DEMO_SCHEMA,
    MEMORY_DATABASE,
    NUODB_DATABASE,
    ConnectionDescriptor,
    memory_url,
)

DEFAULT_DATABASE_URL = memory_url(DEFAULT_DATABASE_NAME)

# Settings fields a connection descriptor may override
_DATASOURCE_FIELDS = {
    "driver": "driver",
    "username": "user",
    "password": "password",
    "url": "url",
    "platform": "platform",
    "dialect": "dialect",
}


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_url(url):
    try:
        return make_url(url)
    except ArgumentError:
        return None


def is_memory_url(url) -> bool:
    """True for SQLite URLs that point at an in-memory database."""
    u = _parse_url(url)
    if u is None or u.get_backend_name() != "sqlite":
        return False
    return u.database in (None, "", ":memory:") or u.query.get("mode") == "memory"


@dataclass(frozen=True)
class Settings:
    """Effective configuration, built once at startup."""

    url: str = DEFAULT_DATABASE_URL
    driver: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    platform: Optional[str] = None
    dialect: Optional[str] = None
    schema: str = DEMO_SCHEMA
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080
    echo_sql: bool = False
    seed_on_startup: bool = True

    @property
    def in_memory(self) -> bool:
        return is_memory_url(self.url)

    def connection_info(self) -> Dict[str, Any]:
        """Public view of the datasource settings. Never includes the password."""
        if self.in_memory:
            return {"database": MEMORY_DATABASE}

        # A URL given in full may name any backend, whatever the platform says
        u = _parse_url(self.url)
        backend = u.get_backend_name() if u is not None else self.platform
        url = u.render_as_string(hide_password=True) if u is not None else self.url
        if backend == "nuodb":
            return {
                "database": NUODB_DATABASE,
                "driver": self.driver,
                "user": self.username,
                "url": url,
                "platform": self.platform,
                "dialect": self.dialect,
            }
        return {
            "database": backend,
            "driver": u.drivername if u is not None else self.driver,
            "user": self.username,
            "url": url,
            "platform": backend,
            "dialect": backend,
        }


def load_settings() -> Settings:
    """Build Settings from the environment, reading a .env file if present."""
    load_dotenv()

    return Settings(
        url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        driver=os.getenv("DATABASE_DRIVER") or None,
        username=os.getenv("DATABASE_USER") or None,
        password=os.getenv("DATABASE_PASSWORD") or None,
        platform=os.getenv("DATABASE_PLATFORM") or None,
        dialect=os.getenv("DATABASE_DIALECT") or None,
        schema=os.getenv("DATABASE_SCHEMA") or DEMO_SCHEMA,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST") or "127.0.0.1",
        port=int(os.getenv("PORT") or 8080),
        echo_sql=_as_bool(os.getenv("SQL_ECHO"), False),
        seed_on_startup=_as_bool(os.getenv("SEED_ON_STARTUP"), True),
    )


def publish_connection(
    settings: Settings, descriptor: Optional[ConnectionDescriptor]
) -> Settings:
    """Return ``settings`` with the datasource fields taken from ``descriptor``.

    Without a descriptor the configured settings win. Blank descriptor values
    leave the existing setting untouched.
    """
    if descriptor is None:
        return settings

    changes = {}
    for field, attr in _DATASOURCE_FIELDS.items():
        value = getattr(descriptor, attr)
        if value is not None and str(value).strip():
            changes[field] = value

    return dataclasses.replace(settings, **changes)
