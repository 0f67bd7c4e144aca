"""
Schema management: creates the target database and the dish search tables.

Both operations check before creating, so they are safe to run on every
startup and before every seed.
"""
import logging
from typing import Union

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import NullPool

from dish_search.core.config import Settings
from dish_search.db.base import Base
from dish_search.models import MenuItem, Order, Restaurant

logger = logging.getLogger(__name__)

# Dependency order: parents first
TABLE_NAMES = (
    Restaurant.__tablename__,
    MenuItem.__tablename__,
    Order.__tablename__,
)


def ensure_database(settings: Settings) -> None:
    """Create the configured database if the server does not have it yet."""
    url = settings.database_url
    backend = url.get_backend_name()

    if backend == "sqlite":
        # The file is created on first connect
        return
    if backend != "postgresql":
        logger.debug(f"Skipping database creation for backend {backend!r}")
        return

    admin_engine = create_engine(
        url.set(database="postgres"),
        isolation_level="AUTOCOMMIT",
        poolclass=NullPool,
        connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
    )
    try:
        with admin_engine.connect() as conn:
            exists = conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": url.database},
            ).scalar()
            if not exists:
                quoted = conn.dialect.identifier_preparer.quote(url.database)
                conn.execute(text(f"CREATE DATABASE {quoted}"))
                logger.info(f"Created database {url.database}")
    finally:
        admin_engine.dispose()


def create_schema(bind: Union[Engine, Connection]) -> None:
    """Create restaurants, menu_items and orders with their keys and indexes."""
    Base.metadata.create_all(bind, checkfirst=True)
    logger.info("Tables ready")


def schema_exists(bind: Union[Engine, Connection]) -> bool:
    """True when all three tables are present."""
    inspector = inspect(bind)
    return all(inspector.has_table(name) for name in TABLE_NAMES)
