from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from vibes_api.api.router import router as api_router
from vibes_api.core.config import Settings, get_settings
from vibes_api.core.errors import register_exception_handlers
from vibes_api.core.lifespan import lifespan
from vibes_api.core.logging import configure_logging
from vibes_api.middleware.request_id import RequestIdMiddleware


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Starlette runs the last-added middleware first, so CORS sees the
    # request before host checks and request-id stamping.
    app.add_middleware(RequestIdMiddleware, header_name=settings.request_id_header)

    if settings.allowed_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)

    if settings.allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allow_origins,
            allow_credentials=settings.cors_allow_credentials,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Event-planning marketplace API: master data, community designs and escrow.",
        debug=settings.debug,
        openapi_url=settings.openapi_url if docs_enabled else None,
        docs_url=settings.docs_url if docs_enabled else None,
        redoc_url=settings.redoc_url if docs_enabled else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    register_exception_handlers(app)
    _install_middleware(app, settings)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app
