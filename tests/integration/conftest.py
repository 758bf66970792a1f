"""Integration test fixtures: real uvicorn server + file-based SQLite."""

from __future__ import annotations

import asyncio
import os
import socket
import threading
import time
from pathlib import Path

import httpx
import pytest
import uvicorn
from sqlalchemy import text

from vibes_api.core.config import get_settings
from vibes_api.core.security import create_access_token

_SQLITE_PATH = Path("/tmp/vibes_integration_test.db")
_DATABASE_URL = f"sqlite:///{_SQLITE_PATH}"


def _find_free_port() -> int:
    """Bind to port 0 on localhost to get a free port from the OS."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def integration_server():
    """Start a real uvicorn server backed by a file-based SQLite DB.

    Yields the base URL (``http://127.0.0.1:<port>``). The app's lifespan
    creates the engine, the session factory and the tables.
    """
    if _SQLITE_PATH.exists():
        _SQLITE_PATH.unlink()
    os.environ["VIBES_API_DATABASE_URL"] = _DATABASE_URL
    get_settings.cache_clear()

    port = _find_free_port()
    config = uvicorn.Config(
        "vibes_api.main:app",
        host="127.0.0.1",
        port=port,
        log_level="warning",
    )
    server = uvicorn.Server(config)

    thread = threading.Thread(target=asyncio.run, args=(server.serve(),), daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{port}"
    for _ in range(50):
        try:
            resp = httpx.get(f"{base_url}/api/healthz", timeout=1.0)
            if resp.status_code == 200:
                break
        except httpx.ConnectError:
            pass
        time.sleep(0.1)
    else:
        raise RuntimeError("Integration server did not become ready in time")

    yield base_url

    server.should_exit = True
    thread.join(timeout=5)
    if _SQLITE_PATH.exists():
        _SQLITE_PATH.unlink()


@pytest.fixture
def http_client(integration_server: str):
    """Yield an ``httpx.Client`` pointed at the integration server."""
    with httpx.Client(base_url=integration_server) as client:
        yield client


@pytest.fixture
def bearer(integration_server: str) -> dict[str, str]:
    token = create_access_token(11, get_settings())
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def _clean_tables(integration_server: str):
    """Empty the tables the integration tests write to before every test."""
    from vibes_api.main import app

    session = app.state.db_session_factory()
    try:
        session.execute(text("DELETE FROM item_categories"))
        session.execute(text("DELETE FROM community_designs_likes"))
        session.execute(text("DELETE FROM community_designs"))
        session.commit()
    finally:
        session.close()
    yield
