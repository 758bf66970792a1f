"""Shared test fixtures."""

from collections.abc import Callable

import pytest
import sqlalchemy as sa
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import vibes_api.models  # noqa: F401  (registers every table)
from vibes_api.db.base import Base


@pytest.fixture(scope="session", autouse=True)
def set_test_env(monkeypatch_session):
    """Set test environment variables before any tests run.

    Uses session scope to set once for all tests, avoiding module-level side effects.
    """
    monkeypatch_session.setenv("VIBES_API_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch_session.setenv("VIBES_API_ESCROW_API_EMAIL", "")
    monkeypatch_session.setenv("VIBES_API_ESCROW_API_KEY", "")
    # Clear settings cache to pick up test environment
    from vibes_api.core.config import get_settings

    get_settings.cache_clear()


@pytest.fixture(scope="session")
def monkeypatch_session():
    """Session-scoped monkeypatch for environment setup."""
    from _pytest.monkeypatch import MonkeyPatch

    mp = MonkeyPatch()
    yield mp
    mp.undo()


@pytest.fixture
def db_engine():
    """Create in-memory SQLite engine for test isolation."""
    engine = sa.create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=sa.pool.StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Session:
    """Create database session from test engine."""
    session = Session(db_engine)
    yield session
    session.close()


@pytest.fixture
def app(db_engine, db_session: Session) -> FastAPI:
    """Create test app with overridden database dependency."""
    from sqlalchemy.orm import sessionmaker

    from vibes_api.app import create_app
    from vibes_api.db.session import get_db

    app = create_app()

    # Set up app.state with test engine and session factory
    app.state.db_engine = db_engine
    app.state.db_session_factory = sessionmaker(bind=db_engine)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def token_for() -> Callable[[int], str]:
    """Mint an access token for a requester id with the test secret."""
    from vibes_api.core.config import get_settings
    from vibes_api.core.security import create_access_token

    def _token_for(user_id: int) -> str:
        return create_access_token(user_id, get_settings())

    return _token_for


@pytest.fixture
def auth_headers(token_for) -> Callable[[int], dict[str, str]]:
    """Authorization header for a requester id.

    Usage:
        def test_something(client, auth_headers):
            client.get("/api/cities/getAll", headers=auth_headers(7))
    """

    def _headers(user_id: int = 7) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(user_id)}"}

    return _headers
