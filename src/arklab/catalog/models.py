"""Pydantic models for catalog records and filter criteria."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgentStatus(StrEnum):
    ACTIVE = "Active"
    BETA = "Beta"
    ARCHIVED = "Archived"


class PricingModel(StrEnum):
    FREE_TIER = "Free Tier"
    SUBSCRIPTION = "Subscription"
    PER_USE = "Per-Use"


class AgentRecord(BaseModel):
    """A single catalog entry. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    status: AgentStatus
    category: str
    pricing_model: PricingModel = Field(alias="pricingModel")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Some datasets use numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


def _dedupe(values: tuple[object, ...]) -> tuple[object, ...]:
    return tuple(dict.fromkeys(values))


class FilterCriteria(BaseModel):
    """Current filter intent. Empty fields mean "unconstrained"."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: str = ""
    status: tuple[AgentStatus, ...] = ()
    category: tuple[str, ...] = ()
    pricing_model: PricingModel | None = Field(default=None, alias="pricingModel")

    @field_validator("status", "category", mode="after")
    @classmethod
    def _unique(cls, value: tuple[object, ...]) -> tuple[object, ...]:
        return _dedupe(value)

    @field_validator("pricing_model", mode="before")
    @classmethod
    def _empty_pricing_is_none(cls, value: object) -> object:
        if value == "":
            return None
        return value

    @property
    def is_unconstrained(self) -> bool:
        return (
            not self.search
            and not self.status
            and not self.category
            and self.pricing_model is None
        )


def default_criteria() -> FilterCriteria:
    return FilterCriteria()


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only view of the catalog state handed to presentation code."""

    records: tuple[AgentRecord, ...]
    filtered: tuple[AgentRecord, ...]
    criteria: FilterCriteria
    loading: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "records": [r.model_dump(mode="json", by_alias=True) for r in self.records],
            "filtered": [r.model_dump(mode="json", by_alias=True) for r in self.filtered],
            "criteria": self.criteria.model_dump(mode="json", by_alias=True),
            "loading": self.loading,
        }
