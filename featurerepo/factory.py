"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer, bootstrap_services
from .logging_config import configure_logging
from .settings import Settings, get_settings
from .switches import RepositorySwitch
from featurerepo.modules.addtorepository import addtorepository_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    switches = RepositorySwitch(settings)
    services = ServiceContainer(settings)

    app = FastAPI(title=settings.app_name, version=settings.version)
    app.include_router(health_router)
    app.include_router(addtorepository_router)
    app.state.container = services
    app.state.switches = switches

    @app.on_event("startup")
    async def _startup() -> None:  # pragma: no cover - invoked by FastAPI
        await bootstrap_services(services, switches)

    return app
