"""Load gateways: async sources for the initial record collection."""

from __future__ import annotations

import asyncio
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Protocol

import httpx
from pydantic import ValidationError

from arklab.catalog.models import AgentRecord
from arklab.config import BUNDLED_SOURCE, CatalogConfig

logger = logging.getLogger(__name__)

BUNDLED_DATASET = "agents.json"


class LoadFailure(Exception):
    """Raised when a gateway cannot supply a well-formed record collection."""


class LoadGateway(Protocol):
    async def fetch(self) -> list[AgentRecord]: ...


def parse_records(payload: object) -> list[AgentRecord]:
    """Validate a decoded JSON payload into records.

    Accepts either a bare list of records or an object with an "agents" list.
    """
    if isinstance(payload, dict):
        payload = payload.get("agents")
    if not isinstance(payload, list):
        raise LoadFailure("expected a list of agent records")

    try:
        records = [AgentRecord.model_validate(item) for item in payload]
    except ValidationError as e:
        raise LoadFailure(f"malformed agent record: {e.error_count()} error(s)") from e

    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise LoadFailure(f"duplicate agent id: {record.id}")
        seen.add(record.id)
    return records


def _decode(text: str, origin: str) -> list[AgentRecord]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadFailure(f"invalid JSON from {origin}: {e}") from e
    return parse_records(payload)


class BundledLoadGateway:
    """The dataset shipped with the package, served after a simulated delay."""

    def __init__(self, delay: float = 1.0) -> None:
        self._delay = delay

    async def fetch(self) -> list[AgentRecord]:
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        pkg = resources.files("arklab.catalog.data")
        text = pkg.joinpath(BUNDLED_DATASET).read_text(encoding="utf-8")
        return _decode(text, "bundled dataset")


class FileLoadGateway:
    def __init__(self, path: Path) -> None:
        self._path = path

    async def fetch(self) -> list[AgentRecord]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise LoadFailure(f"cannot read {self._path}: {e}") from e
        return _decode(text, str(self._path))


class HttpLoadGateway:
    """Fetches the record collection as JSON over HTTP."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def fetch(self) -> list[AgentRecord]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._url)
                _ = resp.raise_for_status()
        except httpx.HTTPError as e:
            raise LoadFailure(f"request to {self._url} failed: {e}") from e
        return _decode(resp.text, self._url)


def build_gateway(config: CatalogConfig) -> LoadGateway:
    """Pick a gateway implementation for the configured source."""
    if config.source == BUNDLED_SOURCE:
        return BundledLoadGateway(delay=config.load_delay)
    if config.is_remote:
        return HttpLoadGateway(config.source, timeout=config.http_timeout)
    return FileLoadGateway(Path(config.source))
