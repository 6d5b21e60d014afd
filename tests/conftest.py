"""Shared fixtures for arklab tests."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from arklab.catalog.models import AgentRecord


def _make_record(
    id: str,
    name: str,
    *,
    description: str = "",
    status: str = "Active",
    category: str = "Support",
    pricing_model: str = "Free Tier",
) -> AgentRecord:
    return AgentRecord(
        id=id,
        name=name,
        description=description,
        status=status,
        category=category,
        pricing_model=pricing_model,
    )


class StaticGateway:
    """Gateway returning a fixed list and counting calls."""

    def __init__(self, records: list[AgentRecord]) -> None:
        self.records = records
        self.calls = 0

    async def fetch(self) -> list[AgentRecord]:
        self.calls += 1
        return list(self.records)


class FailingGateway:
    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("source unavailable")
        self.calls = 0

    async def fetch(self) -> list[AgentRecord]:
        self.calls += 1
        raise self.exc


class FlakyGateway:
    """Gateway that fails ``failures`` times, then returns its records."""

    def __init__(self, records: list[AgentRecord], failures: int = 1) -> None:
        self.records = records
        self.failures = failures
        self.calls = 0

    async def fetch(self) -> list[AgentRecord]:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError("source unavailable")
        return list(self.records)


class GatedGateway:
    """Gateway that blocks until ``release`` is set."""

    def __init__(self, records: list[AgentRecord]) -> None:
        self.records = records
        self.release = asyncio.Event()
        self.calls = 0

    async def fetch(self) -> list[AgentRecord]:
        self.calls += 1
        await self.release.wait()
        return list(self.records)


@pytest.fixture
def support_bot() -> AgentRecord:
    return _make_record(
        "1",
        "Support Bot",
        description="Handles tickets",
        status="Active",
        category="Support",
        pricing_model="Free Tier",
    )


@pytest.fixture
def sales_assistant() -> AgentRecord:
    return _make_record(
        "2",
        "Sales Assistant",
        description="Qualifies leads",
        status="Beta",
        category="Sales",
        pricing_model="Subscription",
    )


@pytest.fixture
def two_records(support_bot: AgentRecord, sales_assistant: AgentRecord) -> list[AgentRecord]:
    return [support_bot, sales_assistant]


@pytest.fixture
def catalog_records() -> list[AgentRecord]:
    """Five records covering every status and pricing model."""
    return [
        _make_record(
            "a1",
            "Support Bot",
            description="Handles tickets",
            status="Active",
            category="Support",
            pricing_model="Free Tier",
        ),
        _make_record(
            "a2",
            "Sales Assistant",
            description="Qualifies leads",
            status="Beta",
            category="Sales",
            pricing_model="Subscription",
        ),
        _make_record(
            "a3",
            "Code Reviewer",
            description="Reviews pull requests for support libraries",
            status="Active",
            category="Development",
            pricing_model="Per-Use",
        ),
        _make_record(
            "a4",
            "Legacy Mailer",
            description="Sends bulk email",
            status="Archived",
            category="Marketing",
            pricing_model="Subscription",
        ),
        _make_record(
            "a5",
            "Lead Scorer",
            description="Ranks inbound prospects",
            status="Active",
            category="Sales",
            pricing_model="Per-Use",
        ),
    ]


@pytest.fixture
def dataset_file(tmp_path: Path, catalog_records: list[AgentRecord]) -> Path:
    """catalog_records written as a JSON array using wire field names."""
    path = tmp_path / "agents.json"
    path.write_text(
        json.dumps([r.model_dump(mode="json", by_alias=True) for r in catalog_records])
    )
    return path
