"""Country and catalogue restrictions on metadata items."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.descriptors import enum_value_or_default


class RestrictionCatalogue(enum.IntEnum):
    AD = 0
    SUBSCRIPTION = 1
    CATALOGUE_ALL = 2
    SHUFFLE = 3
    COMMERCIAL = 4


class RestrictionType(enum.IntEnum):
    STREAMING = 0


def parse_country_codes(country_codes: str) -> list[str]:
    """Split a run of two-letter country codes such as ``"SEDK"`` into ``["SE", "DK"]``."""
    if len(country_codes) % 2:
        raise ValueError(f"country code list has odd length: {country_codes!r}")
    return [country_codes[start : start + 2] for start in range(0, len(country_codes), 2)]


@dataclass
class Restriction:
    catalogues: list[RestrictionCatalogue] = field(default_factory=list)
    restriction_type: RestrictionType = RestrictionType.STREAMING
    catalogue_strs: list[str] = field(default_factory=list)
    countries_allowed: list[str] | None = None
    countries_forbidden: list[str] | None = None

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Restriction:
        allowed = message.get("countries_allowed")
        forbidden = message.get("countries_forbidden")
        return cls(
            catalogues=[
                enum_value_or_default(RestrictionCatalogue, value)
                for value in message.get("catalogue", ())
            ],
            restriction_type=enum_value_or_default(RestrictionType, message.get("type")),
            catalogue_strs=list(message.get("catalogue_str", ())),
            countries_allowed=None if allowed is None else parse_country_codes(allowed),
            countries_forbidden=None if forbidden is None else parse_country_codes(forbidden),
        )