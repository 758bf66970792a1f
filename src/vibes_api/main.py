"""ASGI entry point: ``uvicorn vibes_api.main:app``."""

from __future__ import annotations

from vibes_api.app import create_app

app = create_app()
