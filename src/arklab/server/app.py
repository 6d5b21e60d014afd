"""Starlette app factory with lifespan for the catalog state."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from starlette.applications import Starlette

from arklab.catalog.gateway import LoadGateway, build_gateway
from arklab.catalog.state import CatalogState
from arklab.config import CatalogConfig, load_catalog_config
from arklab.server.routes_catalog import routes as catalog_routes
from arklab.server.routes_system import routes as system_routes


def create_app(
    gateway: LoadGateway | None = None,
    config: CatalogConfig | None = None,
) -> Starlette:
    """Create a Starlette app serving one catalog session.

    The catalog is loaded during startup; filter changes made through the API
    live until the process exits.
    """

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
        source = gateway
        if source is None:
            source = build_gateway(config or load_catalog_config())
        app.state.catalog = CatalogState(source)
        _ = await app.state.catalog.load()
        yield

    return Starlette(routes=system_routes + catalog_routes, lifespan=lifespan)
