from logging.config import fileConfig
import os, sys

from alembic import context
from sqlalchemy import create_engine, pool

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from hr_records.config import DATABASE_URL
from hr_records.db import Base
from hr_records import models  # noqa: F401 - registers tables on Base.metadata

config = context.config

if config.config_file_name is not None and config.get_section("loggers"):
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def _database_url() -> str:
    # alembic -x url=... wins over hr_records settings, then alembic.ini
    return context.get_x_argument(as_dictionary=True).get("url") or DATABASE_URL or config.get_main_option("sqlalchemy.url")

def _configure_options(url: str) -> dict:
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds the table
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }

def run_migrations_offline():
    url = _database_url()
    context.configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"}, **_configure_options(url))
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    url = _database_url()
    connectable = create_engine(url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options(url))
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
