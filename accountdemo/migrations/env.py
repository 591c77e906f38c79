from logging.config import fileConfig

from alembic import context

from accountdemo.config import load_settings
from accountdemo.db import Base, make_engine
from accountdemo import models  # noqa: F401

config = context.config

# Only set up logging when run from the alembic CLI (alembic.ini)
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit the SQL script instead of running it."""
    context.configure(
        url=load_settings().url,
        target_metadata=target_metadata,
        literal_binds=True,
        include_schemas=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # create_app() passes its own connection (in-memory databases)
    connection = config.attributes.get("connection")

    if connection is not None:
        _run(connection)
        return

    engine = make_engine(load_settings())
    with engine.connect() as connection:
        _run(connection)
    engine.dispose()


def _run(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_schemas=True,
    )

    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
