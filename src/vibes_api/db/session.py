from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING, Any

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from vibes_api.core.config import Settings, get_settings
from vibes_api.db.base import Base

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the engine for ``settings.database_url``.

    SQLite connections are shared with the threadpool that runs sync
    endpoints; other backends get connection liveness checks.
    """
    kwargs: dict[str, Any] = {}
    if settings.database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(settings.database_url, **kwargs)


def create_tables(engine: Engine) -> None:
    # Importing the package registers every resource table on Base.metadata.
    import vibes_api.models  # noqa: F401

    Base.metadata.create_all(engine)


def init_db(app: FastAPI, settings: Settings | None = None) -> None:
    """Create the engine and session factory and store them on ``app.state``.

    Missing tables are created when ``create_tables`` is enabled.
    """
    settings = settings or get_settings()
    engine = build_engine(settings)
    if settings.create_tables:
        create_tables(engine)
    logger.info(
        "Database ready: %s (create_tables=%s)",
        engine.url.render_as_string(hide_password=True),
        settings.create_tables,
    )
    app.state.db_engine = engine
    app.state.db_session_factory = sessionmaker(bind=engine, autoflush=False)


def close_db(app: FastAPI) -> None:
    if hasattr(app.state, "db_engine"):
        app.state.db_engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a request-scoped session; uncommitted work is rolled back on error."""
    session_factory: sessionmaker = request.app.state.db_session_factory
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
