"""CLI entry point for the arklab agent catalog."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import cast

from arklab import __version__
from arklab.catalog.gateway import build_gateway
from arklab.catalog.models import AgentStatus, CatalogSnapshot, PricingModel
from arklab.catalog.state import CatalogState
from arklab.catalog.view import (
    active_filter_count,
    distinct_categories,
    page_description,
    page_title,
)
from arklab.config import CatalogConfig, load_catalog_config


def _config_for(args: argparse.Namespace) -> CatalogConfig:
    config = load_catalog_config()
    source = cast(str | None, getattr(args, "source", None))
    if source:
        config.source = source
    return config


async def _fetch(state: CatalogState) -> CatalogSnapshot:
    return await state.load()


def _load(config: CatalogConfig) -> CatalogState:
    state = CatalogState(build_gateway(config))
    _ = asyncio.run(_fetch(state))
    if not state.loaded:
        print(f"Error: failed to load agents from {config.source}", file=sys.stderr)
        sys.exit(1)
    return state



def _print_table(snapshot: CatalogSnapshot) -> None:
    print(page_title(snapshot))
    print(page_description(snapshot))
    active = active_filter_count(snapshot.criteria)
    if active:
        print(f"Active filters: {active}")
    print()

    if not snapshot.filtered:
        print("No agents match the current filters.")
        return

    for agent in snapshot.filtered:
        print(
            f"  {agent.id:>4}  {agent.name:<28} {agent.status:<9}"
            f" {agent.category:<18} {agent.pricing_model}"
        )
    print(f"\n{len(snapshot.filtered)} of {len(snapshot.records)} agents")


def _cmd_browse(args: argparse.Namespace) -> None:
    state = _load(_config_for(args))

    search = cast(str | None, args.search)
    statuses = cast(list[str] | None, args.status)
    categories = cast(list[str] | None, args.category)
    pricing = cast(str | None, args.pricing_model)

    if search:
        _ = state.set_search(search)
    if statuses:
        _ = state.set_status_filter(statuses)
    if categories:
        _ = state.set_category_filter(categories)
    if pricing:
        _ = state.set_pricing_model_filter(pricing)

    snapshot = state.snapshot()
    if cast(bool, args.json):
        payload = {
            "criteria": snapshot.criteria.model_dump(mode="json", by_alias=True),
            "agents": [a.model_dump(mode="json", by_alias=True) for a in snapshot.filtered],
            "count": len(snapshot.filtered),
            "total": len(snapshot.records),
        }
        print(json.dumps(payload, indent=2))
        return
    _print_table(snapshot)


def _cmd_categories(args: argparse.Namespace) -> None:
    state = _load(_config_for(args))
    for category in distinct_categories(state.records):
        print(category)


def _cmd_serve(args: argparse.Namespace) -> None:
    from arklab.server.runner import run_server

    config = _config_for(args)
    host = cast(str | None, args.host)
    port = cast(int | None, args.port)
    if host:
        config.host = host
    if port is not None:
        config.port = port
    run_server(config)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="arklab",
        description="Browse and filter the ArkLab AI agents catalog",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"arklab {__version__}"
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    source_help = "Catalog source: 'bundled', a JSON file path, or an http(s) URL"

    # browse subcommand
    browse_p = subparsers.add_parser("browse", help="List agents matching the given filters")
    _ = browse_p.add_argument("--source", default=None, help=source_help)
    _ = browse_p.add_argument("--search", "-s", default=None, help="Match name or description")
    _ = browse_p.add_argument(
        "--status",
        action="append",
        choices=[s.value for s in AgentStatus],
        help="Include this status (repeatable)",
    )
    _ = browse_p.add_argument(
        "--category", action="append", help="Include this category (repeatable)"
    )
    _ = browse_p.add_argument(
        "--pricing-model",
        dest="pricing_model",
        choices=[p.value for p in PricingModel],
        default=None,
        help="Only agents with this pricing model",
    )
    _ = browse_p.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # categories subcommand
    categories_p = subparsers.add_parser("categories", help="List categories present in the catalog")
    _ = categories_p.add_argument("--source", default=None, help=source_help)

    # serve subcommand
    serve_p = subparsers.add_parser("serve", help="Start the HTTP API server")
    _ = serve_p.add_argument("--source", default=None, help=source_help)
    _ = serve_p.add_argument("--host", default=None, help="Bind address")
    _ = serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if cast(bool, args.verbose) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "browse": _cmd_browse,
        "categories": _cmd_categories,
        "serve": _cmd_serve,
    }
    command = cast(str | None, args.command)
    handler = handlers.get(command) if command else None
    if handler is None:
        parser.print_help()
        sys.exit(1)
    handler(args)


if __name__ == "__main__":
    main()
