"""
Standalone seed: creates the database and tables if needed, then replaces
their contents with the sample catalog.

Usage:
    dish-search-seed
"""
import logging
import sys

from dish_search.core.config import get_settings
from dish_search.core.logging import configure_logging
from dish_search.db.session import build_engine
from dish_search.services.schema import ensure_database
from dish_search.services.seed import seed_database

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.database_url, settings)

    try:
        ensure_database(settings)
        summary = seed_database(engine)
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        return 1
    finally:
        engine.dispose()

    logger.info(
        f"Seeded {summary.restaurants} restaurants, "
        f"{summary.menu_items} menu items and {summary.orders} orders"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
