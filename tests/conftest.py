"""
Test configuration and fixtures.

Every test gets its own SQLite database file, seeded with the sample
catalog where needed.
"""
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

# Set environment before importing app
os.environ["DATABASE_URL"] = f"sqlite:///{Path(tempfile.gettempdir()) / 'dish_search_app.db'}"
os.environ["AUTO_SEED"] = "false"

from dish_search.main import app
from dish_search.core.config import Settings
from dish_search.db.session import build_engine, get_db
from dish_search.services.seed import seed_database


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file."""
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'dish_search.db'}", AUTO_SEED=False)


@pytest.fixture
def engine(settings: Settings) -> Generator[Engine, None, None]:
    """Engine over an empty database (no tables)."""
    engine = build_engine(settings.database_url, settings)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(engine: Engine) -> Engine:
    """Engine over a database loaded with the sample catalog."""
    seed_database(engine)
    return engine


@pytest.fixture
def db(seeded_engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for the test."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=seeded_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
