# =============================================================================
# File: accountdemo/connection.py
# Purpose: Turn command-line tokens into database connection details.
# =============================================================================
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

log = logging.getLogger(__name__)

NUODB_DATABASE = "NuoDB Database"
MEMORY_DATABASE = "SQLite in-memory"

# Defaults used when fewer than three arguments are given
DEFAULT_DATABASE_NAME = "testdb"
DEFAULT_NUODB_USER = "dba"
DEFAULT_NUODB_PASSWORD = "dba"

NUODB_DRIVER = "pynuodb"
NUODB_SCHEME = "nuodb://"
NUODB_DATABASE_URL = NUODB_SCHEME + "localhost/"
NUODB_PLATFORM = "nuodb"
NUODB_DIALECT = "nuodb"

MEMORY_PREFIX = "h2/"
DEFAULT_MEMORY_USER = "sa"
DEFAULT_MEMORY_PASSWORD = ""
MEMORY_DRIVER = "pysqlite"
MEMORY_PLATFORM = "sqlite"
MEMORY_DIALECT = "sqlite"

DEMO_SCHEMA = "demo"

# Tokens starting with this belong to option syntax (e.g. --debug)
OPTION_PREFIX = "--"
EXPECTED_ARGS = 3


def memory_url(db_name: str) -> str:
    """SQLAlchemy URL of a named in-memory SQLite database."""
    return f"sqlite:///file:{db_name}?mode=memory&uri=true"


@dataclass(frozen=True)
class ConnectionDescriptor:
    database_type: str
    driver: str
    user: str
    password: str
    url: str
    platform: Optional[str] = None
    dialect: Optional[str] = None

    @property
    def in_memory(self) -> bool:
        return self.database_type == MEMORY_DATABASE

    def redacted(self) -> str:
        """``user:***@url``, safe to log."""
        return f"{self.user}:***@{self.url}"

    def __str__(self) -> str:
        if self.in_memory:
            return MEMORY_DATABASE
        return f"{NUODB_DATABASE}: {self.user}@{self.url}"


def positional_args(argv: Sequence[str]) -> List[str]:
    """Return the tokens of ``argv`` that are not ``--`` options."""
    return [arg for arg in argv if not arg.startswith(OPTION_PREFIX)]


def resolve_connection(argv: Sequence[str]) -> Optional[ConnectionDescriptor]:
    """Get the connection details from the command-line arguments.

    Expects, in order:
      - user name for the connection
      - password for that user
      - database: a name on localhost, ``host/db-name``, a full URL
        (anything containing ``:``) or ``h2/<name>`` for an in-memory database

    Returns None when no positional argument is given, meaning the caller
    should rely on the configured defaults. Missing trailing arguments are
    filled with ``dba``/``dba``/``testdb``. Never raises.
    """
    conn_args = [DEFAULT_NUODB_USER, DEFAULT_NUODB_PASSWORD, DEFAULT_DATABASE_NAME]
    ix = 0

    for arg in positional_args(argv):
        if ix == EXPECTED_ARGS:
            log.warning("Ignoring unexpected argument: %s", arg)
        else:
            conn_args[ix] = arg
            ix += 1

    if ix == 0:
        return None

    if ix != EXPECTED_ARGS:
        log.info(
            "Three arguments expected: username, password and database-name. "
            "Received only %s, using defaults.",
            ix,
        )

    user, password, db_spec = conn_args

    if db_spec.startswith(MEMORY_PREFIX):
        name = db_spec.split("/")[1].strip() or DEFAULT_DATABASE_NAME
        descriptor = ConnectionDescriptor(
            database_type=MEMORY_DATABASE,
            driver=MEMORY_DRIVER,
            user=DEFAULT_MEMORY_USER,
            password=DEFAULT_MEMORY_PASSWORD,
            url=memory_url(name),
            platform=MEMORY_PLATFORM,
            dialect=MEMORY_DIALECT,
        )
    else:
        if ":" in db_spec:
            url = db_spec
        elif "/" in db_spec:
            url = NUODB_SCHEME + db_spec
        else:
            url = NUODB_DATABASE_URL + db_spec

        descriptor = ConnectionDescriptor(
            database_type=NUODB_DATABASE,
            driver=NUODB_DRIVER,
            user=user,
            password=password,
            url=url,
            platform=NUODB_PLATFORM,
            dialect=NUODB_DIALECT,
        )

    log.info("Connecting to %s", descriptor.redacted())
    return descriptor
