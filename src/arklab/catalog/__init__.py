"""Agent catalog: records, filter evaluation, and the catalog state container."""

from arklab.catalog.evaluator import evaluate, matches
from arklab.catalog.gateway import (
    BundledLoadGateway,
    FileLoadGateway,
    HttpLoadGateway,
    LoadFailure,
    LoadGateway,
    build_gateway,
    parse_records,
)
from arklab.catalog.models import (
    AgentRecord,
    AgentStatus,
    CatalogSnapshot,
    FilterCriteria,
    PricingModel,
    default_criteria,
)
from arklab.catalog.state import CatalogState
from arklab.catalog.view import (
    active_filter_count,
    distinct_categories,
    page_description,
    page_title,
    toggle,
)

__all__ = [
    "AgentRecord",
    "AgentStatus",
    "BundledLoadGateway",
    "CatalogSnapshot",
    "CatalogState",
    "FileLoadGateway",
    "FilterCriteria",
    "HttpLoadGateway",
    "LoadFailure",
    "LoadGateway",
    "PricingModel",
    "active_filter_count",
    "build_gateway",
    "default_criteria",
    "distinct_categories",
    "evaluate",
    "matches",
    "page_description",
    "page_title",
    "parse_records",
    "toggle",
]
