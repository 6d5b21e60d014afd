"""Filter evaluation: apply FilterCriteria to a sequence of records."""

from __future__ import annotations

from collections.abc import Sequence

from arklab.catalog.models import AgentRecord, FilterCriteria


def matches(record: AgentRecord, criteria: FilterCriteria) -> bool:
    """Return True when the record satisfies every active constraint.

    An empty criteria field never excludes anything.
    """
    if criteria.search:
        needle = criteria.search.lower()
        if needle not in record.name.lower() and needle not in record.description.lower():
            return False

    if criteria.status and record.status not in criteria.status:
        return False

    if criteria.category and record.category not in criteria.category:
        return False

    if criteria.pricing_model is not None and record.pricing_model != criteria.pricing_model:
        return False

    return True


def evaluate(records: Sequence[AgentRecord], criteria: FilterCriteria) -> list[AgentRecord]:
    """Stable filter of records by criteria. Pure and deterministic."""
    return [r for r in records if matches(r, criteria)]
