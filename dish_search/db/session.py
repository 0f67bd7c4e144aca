"""
Database engine (the process-wide connection pool) and session management.
"""
from typing import Generator, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import sessionmaker, Session

from dish_search.core.config import Settings, get_settings


def build_engine(url: Union[str, URL], settings: Settings) -> Engine:
    """
    Create an engine for `url` with the pool limits and timeouts from settings.

    Requests beyond DB_POOL_SIZE wait up to DB_CONNECT_TIMEOUT seconds for a
    free connection instead of opening new ones.
    """
    url = make_url(url)

    if url.get_backend_name() == "sqlite":
        engine = create_engine(url, connect_args={"check_same_thread": False})

        # SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked
        @event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_conn, _):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    connect_args = {}
    if url.get_backend_name() == "postgresql":
        connect_args = {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            "options": f"-c statement_timeout={settings.DB_QUERY_TIMEOUT * 1000}",
        }

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_CONNECT_TIMEOUT,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


settings = get_settings()

engine = build_engine(settings.database_url, settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def dispose_engine() -> None:
    """Close every pooled connection; called on application shutdown."""
    engine.dispose()
