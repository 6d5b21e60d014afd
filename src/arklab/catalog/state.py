"""CatalogState: owner of loaded records, filter criteria and the filtered view."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from enum import StrEnum
from typing import TypeVar

from arklab.catalog.evaluator import evaluate
from arklab.catalog.gateway import LoadGateway
from arklab.catalog.models import (
    AgentRecord,
    AgentStatus,
    CatalogSnapshot,
    FilterCriteria,
    PricingModel,
    default_criteria,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


def _known(enum: type[E], values: Iterable[str], label: str) -> list[E]:
    """Keep only values that belong to the closed enumeration.

    Raises ValueError when a non-empty selection has no known value left, so
    an unknown selection never widens into "unconstrained".
    """
    if isinstance(values, str):
        values = [values]
    values = list(values)
    kept: list[E] = []
    for value in values:
        try:
            kept.append(enum(value))
        except ValueError:
            logger.warning(f"Ignoring unknown {label} filter value: {value!r}")
    if values and not kept:
        raise ValueError(f"no known {label} value in {values!r}")
    return kept


class CatalogState:
    """Single writer of records, criteria and filtered.

    Every mutation replaces the criteria and re-derives ``filtered`` before
    returning, so a snapshot is never stale.
    """

    _gateway: LoadGateway
    _records: tuple[AgentRecord, ...]
    _filtered: tuple[AgentRecord, ...]
    _criteria: FilterCriteria
    _loading: bool
    _loaded: bool
    _inflight: asyncio.Task[None] | None

    def __init__(self, gateway: LoadGateway) -> None:
        self._gateway = gateway
        self._records = ()
        self._filtered = ()
        self._criteria = default_criteria()
        self._loading = False
        self._loaded = False
        self._inflight = None

    @property
    def records(self) -> tuple[AgentRecord, ...]:
        return self._records

    @property
    def filtered(self) -> tuple[AgentRecord, ...]:
        return self._filtered

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def loaded(self) -> bool:
        """True once a load has succeeded, even if it returned no records."""
        return self._loaded

    def snapshot(self) -> CatalogSnapshot:
        return CatalogSnapshot(
            records=self._records,
            filtered=self._filtered,
            criteria=self._criteria,
            loading=self._loading,
        )

    def load(self) -> asyncio.Task[CatalogSnapshot]:
        """Start fetching records from the gateway and return the pending result.

        ``loading`` is set before this method returns, so it must be called
        from a running event loop. A call made while a load is in flight waits
        for that load instead of starting another. Once records are loaded,
        further calls are no-ops. Gateway failures are logged and leave the
        records untouched.
        """
        loop = asyncio.get_running_loop()
        if self._loaded:
            logger.debug("Catalog already loaded; skipping gateway call")
        elif self._inflight is None:
            self._loading = True
            self._inflight = loop.create_task(self._run_load())
        return loop.create_task(self._join())

    async def _join(self) -> CatalogSnapshot:
        if self._inflight is not None:
            await asyncio.shield(self._inflight)
        return self.snapshot()

    async def _run_load(self) -> None:
        logger.info("Loading agent catalog")
        try:
            records = await self._gateway.fetch()
        except Exception as e:
            logger.warning(f"Catalog load failed: {e}")
        else:
            self._records = tuple(records)
            self._loaded = True
            # Criteria set while loading apply to the fresh records
            self._recompute()
            logger.info(f"Loaded {len(self._records)} agents")
        finally:
            self._loading = False
            self._inflight = None

    def set_search(self, text: str) -> CatalogSnapshot:
        return self._update(search=text)

    def set_status_filter(self, statuses: Iterable[str]) -> CatalogSnapshot:
        """Replace the status selection. Unknown values are dropped.

        Raises ValueError when the selection is non-empty but entirely unknown.
        """
        return self._update(status=_known(AgentStatus, statuses, "status"))

    def set_category_filter(self, categories: Iterable[str]) -> CatalogSnapshot:
        if isinstance(categories, str):
            categories = [categories]
        return self._update(category=[str(c) for c in categories])

    def set_pricing_model_filter(self, model: str | None) -> CatalogSnapshot:
        """Set the pricing model constraint. Empty values clear it.

        Raises ValueError for an unknown model; the criteria are left as they were.
        """
        if not model:
            return self._update(pricing_model=None)
        return self._update(pricing_model=_known(PricingModel, [model], "pricing model")[0])

    def clear_all_filters(self) -> CatalogSnapshot:
        self._criteria = default_criteria()
        self._filtered = self._records
        return self.snapshot()

    def _update(self, **changes: object) -> CatalogSnapshot:
        data = self._criteria.model_dump()
        data.update(changes)
        self._criteria = FilterCriteria.model_validate(data)
        self._recompute()
        return self.snapshot()

    def _recompute(self) -> None:
        self._filtered = tuple(evaluate(self._records, self._criteria))
        logger.debug(f"Filtered {len(self._filtered)} of {len(self._records)} agents")
