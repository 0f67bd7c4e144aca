"""
Tests for the command line entry points.
"""
from unittest.mock import patch

from sqlalchemy import func, select

from dish_search.db.session import build_engine
from dish_search.models import Order
from dish_search.scripts import seed, serve


class TestSeedScript:
    """Tests for the dish-search-seed entry point."""

    def test_seeds_configured_database(self, settings):
        """Should seed the configured database and exit cleanly."""
        with patch("dish_search.scripts.seed.get_settings", return_value=settings):
            assert seed.main() == 0

        engine = build_engine(settings.database_url, settings)
        try:
            with engine.connect() as conn:
                assert conn.execute(select(func.count()).select_from(Order)).scalar_one() == 1139
        finally:
            engine.dispose()

    def test_failure_exits_non_zero(self, settings):
        """Should exit with status 1 when seeding fails."""
        with patch("dish_search.scripts.seed.get_settings", return_value=settings), \
                patch("dish_search.scripts.seed.seed_database", side_effect=RuntimeError("boom")):
            assert seed.main() == 1


class TestServeScript:
    """Tests for the dish-search-serve entry point."""

    def test_runs_uvicorn_on_configured_port(self, settings):
        """Should start uvicorn on the configured host and port."""
        settings.HOST = "127.0.0.1"
        settings.PORT = 8123

        with patch("dish_search.scripts.serve.get_settings", return_value=settings), \
                patch("dish_search.scripts.serve.uvicorn.run") as run:
            serve.main()

        run.assert_called_once_with(
            "dish_search.main:app",
            host="127.0.0.1",
            port=8123,
            log_level="info",
        )
