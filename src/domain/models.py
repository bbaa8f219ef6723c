"""
Domain models for the formatting helpers.

Defines the immutable allow-list of trusted root domains used by the URL
validator and the date patterns understood by `split_date`.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Tuple

from pydantic import BaseModel, Field, field_validator

_BARE_DOMAIN = re.compile(r"^[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)+$")


class DatePattern(str, Enum):
    """Output patterns accepted by `split_date`."""

    DATETIME = "YYYY-MM-DD hh:mm:ss"
    SLASHED_DATE = "YYYY/MM/DD"
    DASHED_DATE = "YYYY-MM-DD"


class DomainAllowList(BaseModel):
    """
    Ordered, immutable set of trusted root domains.

    Every entry must be a bare registrable domain: no scheme, user-info,
    port, path or whitespace. Duplicates are dropped, first occurrence wins.
    """

    domains: Tuple[str, ...] = Field(..., min_length=1, description="Trusted root domains.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("domains", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            return value
        seen: list[str] = []
        for raw in value:
            if not isinstance(raw, str):
                raise ValueError(f"Domain entries must be strings, got {type(raw).__name__}")
            domain = raw.strip()
            if not _BARE_DOMAIN.match(domain):
                raise ValueError(f"'{raw}' is not a bare domain name")
            if domain not in seen:
                seen.append(domain)
        return tuple(seen)

    @classmethod
    def of(cls, domains: Iterable[str]) -> "DomainAllowList":
        """Build an allow-list from any iterable of domain strings."""
        return cls(domains=tuple(domains))


__all__ = ["DatePattern", "DomainAllowList"]
