"""
Startup seed check.

Seeds the database when it is empty or the schema has not been created yet.
Seeding here is best effort: a failure is logged and the API still starts.
"""
import logging
from enum import Enum
from typing import Optional

from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from dish_search.core.config import Settings
from dish_search.models import Restaurant
from dish_search.services.schema import create_schema, ensure_database, schema_exists
from dish_search.services.seed import seed_database

logger = logging.getLogger(__name__)


class BootstrapOutcome(str, Enum):
    SKIPPED = "skipped"
    SEEDED = "seeded"
    FAILED = "failed"


def count_restaurants(engine: Engine) -> Optional[int]:
    """Number of stored restaurants, or None when the restaurants table does not exist."""
    with engine.connect() as conn:
        if not inspect(conn).has_table(Restaurant.__tablename__):
            return None
        return conn.execute(select(func.count()).select_from(Restaurant)).scalar_one()


def _complete_schema(engine: Engine) -> None:
    """Add any missing tables next to existing data without touching its rows."""
    try:
        with engine.begin() as conn:
            if not schema_exists(conn):
                logger.info("Some tables are missing, creating them")
                create_schema(conn)
    except SQLAlchemyError as e:
        logger.warning(f"Could not create missing tables: {e}")


def bootstrap_database(engine: Engine, settings: Settings) -> BootstrapOutcome:
    """Seed the store unless it already holds restaurants."""
    try:
        ensure_database(settings)
    except SQLAlchemyError as e:
        logger.warning(f"Could not verify the database exists, checking it directly: {e}")

    try:
        count = count_restaurants(engine)
    except SQLAlchemyError as e:
        logger.warning(f"Could not check for existing data, starting without seeding: {e}")
        return BootstrapOutcome.FAILED

    if count:
        logger.info(f"Database already has {count} restaurants, skipping seed")
        _complete_schema(engine)
        return BootstrapOutcome.SKIPPED

    if count is None:
        logger.info("Tables not found, seeding database")
    else:
        logger.info("Database is empty, seeding")

    try:
        summary = seed_database(engine)
    except Exception as e:
        logger.warning(f"Auto-seed failed, starting anyway: {e}", exc_info=True)
        return BootstrapOutcome.FAILED

    logger.info(
        f"Seeded {summary.restaurants} restaurants, "
        f"{summary.menu_items} menu items and {summary.orders} orders"
    )
    return BootstrapOutcome.SEEDED
