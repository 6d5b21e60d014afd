"""Uvicorn launcher for the catalog API."""

from __future__ import annotations

import logging

from arklab.config import CatalogConfig, load_catalog_config

logger = logging.getLogger(__name__)


def run_server(config: CatalogConfig | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    from arklab.server.app import create_app

    if config is None:
        config = load_catalog_config()

    logger.info(f"Serving agent catalog from {config.source} on {config.host}:{config.port}")
    uvicorn.run(create_app(config=config), host=config.host, port=config.port)
