"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from lostfound.api.routes import admin, health
from lostfound.core.config import AppSettings
from lostfound.core.logging import configure_logging
from lostfound.core.protocols import IApproverDirectory
from lostfound.persistence import create_workload_tracker
from lostfound.persistence.memory_backend import MemoryApproverDirectory
from lostfound.routing import RoutingEngine


def create_app(
    settings: Optional[AppSettings] = None,
    engine: Optional[RoutingEngine] = None,
    directory: Optional[IApproverDirectory] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Pass ``engine`` to share the routing engine the request handlers use;
    otherwise one is built from ``directory`` and the configured tracker.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        resolved = settings or AppSettings()
        configure_logging(resolved.log_level)
        app.state.settings = resolved
        app.state.engine = engine or RoutingEngine(
            directory=directory or MemoryApproverDirectory(),
            tracker=create_workload_tracker(resolved),
            config=resolved.routing,
        )
        yield

    app = FastAPI(
        title="Lost & Found Work-Request Routing",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(admin.router, prefix="/admin")
    return app
