"""Catalog routes: read the filtered view and mutate filter criteria."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from arklab.catalog.models import CatalogSnapshot
from arklab.catalog.state import CatalogState
from arklab.catalog.view import (
    active_filter_count,
    distinct_categories,
    page_description,
    page_title,
    toggle,
)


def _render(snapshot: CatalogSnapshot) -> JSONResponse:
    payload = snapshot.to_dict()
    payload.update(
        {
            "count": len(snapshot.filtered),
            "total": len(snapshot.records),
            "title": page_title(snapshot),
            "description": page_description(snapshot),
            "active_filters": active_filter_count(snapshot.criteria),
            "categories": distinct_categories(snapshot.records),
        }
    )
    return JSONResponse(payload)


async def _read_body(request: Request) -> dict[str, object] | JSONResponse:
    try:
        body = await request.json()
    except Exception:
        return JSONResponse({"error": "Invalid JSON"}, status_code=422)
    if not isinstance(body, dict):
        return JSONResponse({"error": "Expected a JSON object"}, status_code=422)
    return body


def _string_list(body: dict[str, object], key: str) -> list[str] | None:
    value = body.get(key)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return None
    return value


def _toggle_args(body: dict[str, object]) -> tuple[str, bool] | JSONResponse:
    value = body.get("value")
    checked = body.get("checked")
    if not isinstance(value, str) or not isinstance(checked, bool):
        return JSONResponse(
            {"error": "value must be a string and checked a boolean"}, status_code=422
        )
    return value, checked


async def get_catalog(request: Request) -> JSONResponse:
    """GET /api/catalog — current snapshot with page metadata."""
    catalog: CatalogState = request.app.state.catalog
    return _render(catalog.snapshot())


async def list_categories(request: Request) -> JSONResponse:
    """GET /api/catalog/categories — categories derived from loaded records."""
    catalog: CatalogState = request.app.state.catalog
    categories = distinct_categories(catalog.records)
    return JSONResponse({"categories": categories, "count": len(categories)})


async def set_search(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/search — replace the search text."""
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    search = body.get("search")
    if not isinstance(search, str):
        return JSONResponse({"error": "search must be a string"}, status_code=422)
    return _render(request.app.state.catalog.set_search(search))


async def set_status(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/status — replace the status selection."""
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    statuses = _string_list(body, "status")
    if statuses is None:
        return JSONResponse({"error": "status must be a list of strings"}, status_code=422)
    try:
        snapshot = request.app.state.catalog.set_status_filter(statuses)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=422)
    return _render(snapshot)


async def set_category(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/category — replace the category selection."""
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    categories = _string_list(body, "category")
    if categories is None:
        return JSONResponse({"error": "category must be a list of strings"}, status_code=422)
    return _render(request.app.state.catalog.set_category_filter(categories))


async def toggle_status(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/status/toggle — check or uncheck one status."""
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    toggled = _toggle_args(body)
    if isinstance(toggled, JSONResponse):
        return toggled
    catalog: CatalogState = request.app.state.catalog
    statuses = toggle(catalog.criteria.status, *toggled)
    try:
        snapshot = catalog.set_status_filter(statuses)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=422)
    return _render(snapshot)


async def toggle_category(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/category/toggle — check or uncheck one category."""
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    toggled = _toggle_args(body)
    if isinstance(toggled, JSONResponse):
        return toggled
    catalog: CatalogState = request.app.state.catalog
    categories = toggle(catalog.criteria.category, *toggled)
    return _render(catalog.set_category_filter(categories))


async def set_pricing_model(request: Request) -> JSONResponse:
    """PUT /api/catalog/filters/pricing-model — set or clear the pricing model.

    Accepts ``pricing_model`` or its wire alias ``pricingModel``; null or ""
    clears the constraint.
    """
    body = await _read_body(request)
    if isinstance(body, JSONResponse):
        return body
    key = next((k for k in ("pricing_model", "pricingModel") if k in body), None)
    if key is None:
        return JSONResponse({"error": "pricing_model is required"}, status_code=422)
    model = body[key]
    if model is not None and not isinstance(model, str):
        return JSONResponse({"error": "pricing_model must be a string or null"}, status_code=422)
    try:
        snapshot = request.app.state.catalog.set_pricing_model_filter(model)
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=422)
    return _render(snapshot)


async def clear_filters(request: Request) -> JSONResponse:
    """DELETE /api/catalog/filters — reset every filter."""
    return _render(request.app.state.catalog.clear_all_filters())


routes = [
    Route("/api/catalog", get_catalog),
    Route("/api/catalog/categories", list_categories),
    Route("/api/catalog/filters", clear_filters, methods=["DELETE"]),
    Route("/api/catalog/filters/search", set_search, methods=["PUT"]),
    Route("/api/catalog/filters/status", set_status, methods=["PUT"]),
    Route("/api/catalog/filters/status/toggle", toggle_status, methods=["PUT"]),
    Route("/api/catalog/filters/category", set_category, methods=["PUT"]),
    Route("/api/catalog/filters/category/toggle", toggle_category, methods=["PUT"]),
    Route("/api/catalog/filters/pricing-model", set_pricing_model, methods=["PUT"]),
]
