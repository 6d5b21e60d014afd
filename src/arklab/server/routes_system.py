"""System routes: health and version."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from arklab import __version__ as VERSION


async def health(request: Request) -> JSONResponse:
    catalog = request.app.state.catalog
    return JSONResponse(
        {
            "status": "ok",
            "loading": catalog.loading,
            "loaded": catalog.loaded,
            "records": len(catalog.records),
        }
    )


async def version(request: Request) -> JSONResponse:
    return JSONResponse({"version": VERSION})


routes = [
    Route("/health", health),
    Route("/api/version", version),
]
