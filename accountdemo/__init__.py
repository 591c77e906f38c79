# accountdemo/__init__.py
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask

from .config import Settings, load_settings, publish_connection
from .connection import ConnectionDescriptor
from .db import init_db, make_engine, make_session_factory
from .demo import DemoRunner
from .repository import SqlAlchemyAccountRepository
from .routes import register_routes
from .services import AccountService

log = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    descriptor: Optional[ConnectionDescriptor] = None,
) -> Flask:
    """Build the app: engine, schema, services, demo data and routes.

    ``settings`` defaults to the environment (.env); ``descriptor`` holds the
    connection given on the command line, if any, and overrides it.
    """
    settings = publish_connection(settings or load_settings(), descriptor)

    app = Flask(__name__)

    engine = make_engine(settings)
    init_db(engine)

    session_factory = make_session_factory(engine)
    service = AccountService(SqlAlchemyAccountRepository(session_factory))

    if settings.seed_on_startup:
        DemoRunner(service).run_demo()

    app.extensions["settings"] = settings
    app.extensions["engine"] = engine
    app.extensions["account_service"] = service

    register_routes(app)

    log.info("Application ready on %s", settings.connection_info().get("database"))
    return app
