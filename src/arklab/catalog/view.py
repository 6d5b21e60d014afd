"""Derived values for presentation code: categories, filter badges, page metadata."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from arklab.catalog.models import AgentRecord, CatalogSnapshot, FilterCriteria

CATALOG_TITLE = "ArkLab AI Agents Catalog"
LOADING_TITLE = "Loading AI Agents - ArkLab"
LOADING_DESCRIPTION = "Loading AI agents catalog..."


def distinct_categories(records: Iterable[AgentRecord]) -> list[str]:
    return sorted({r.category for r in records})


def toggle(values: Sequence[str], value: str, checked: bool) -> list[str]:
    """Return the complete new selection after checking or unchecking one value."""
    current = [str(v) for v in values]
    if checked:
        return current if value in current else [*current, value]
    return [v for v in current if v != value]


def active_filter_count(criteria: FilterCriteria) -> int:
    return (
        len(criteria.status)
        + len(criteria.category)
        + (1 if criteria.pricing_model else 0)
        + (1 if criteria.search else 0)
    )


def page_title(snapshot: CatalogSnapshot) -> str:
    if snapshot.loading:
        return LOADING_TITLE

    criteria = snapshot.criteria
    parts: list[str] = []
    if criteria.search:
        parts.append(f'"{criteria.search}"')
    if criteria.status:
        parts.append(", ".join(criteria.status))
    if criteria.category:
        parts.append(", ".join(criteria.category))
    if criteria.pricing_model:
        parts.append(criteria.pricing_model)

    if parts:
        return f"{CATALOG_TITLE} - {' • '.join(parts)}"
    return CATALOG_TITLE


def page_description(snapshot: CatalogSnapshot) -> str:
    if snapshot.loading:
        return LOADING_DESCRIPTION

    description = (
        f"Discover {len(snapshot.filtered)} AI agents for various business needs "
        "including customer service, marketing, development, and more."
    )
    if not snapshot.criteria.is_unconstrained:
        description += " Filtered results based on your search criteria."
    return description

