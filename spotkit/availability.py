"""Availability windows, sale periods and date conversion."""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.restriction import Restriction

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)


class UnavailabilityReason(enum.Enum):
    """Why an audio item cannot be played."""

    BLACKLISTED = "blacklist present and country on it"
    EMBARGO = "available date is in the future"
    NO_DATA = "required data was not present"
    NOT_WHITELISTED = "whitelist present and country not on it"

    def __str__(self) -> str:
        return self.value


def timestamp_to_date(timestamp_ms: int) -> _dt.datetime:
    """Convert milliseconds since the Unix epoch into an aware UTC datetime."""
    try:
        return _EPOCH + _dt.timedelta(milliseconds=timestamp_ms)
    except OverflowError as e:
        raise ValueError(f"timestamp out of range: {timestamp_ms}") from e


def date_from_message(message: Mapping[str, Any] | None) -> _dt.datetime:
    """Convert a date message (year, month, day, hour, minute) into a UTC datetime.

    A missing month or day means the first one; a missing year the earliest year.
    """
    message = message or {}
    try:
        return _dt.datetime(
            int(message.get("year", _dt.MINYEAR)),
            int(message.get("month", 1)),
            int(message.get("day", 1)),
            int(message.get("hour", 0)),
            int(message.get("minute", 0)),
            tzinfo=_dt.timezone.utc,
        )
    except (OverflowError, ValueError) as e:
        raise ValueError(f"invalid date: {dict(message)!r}") from e


@dataclass
class Availability:
    catalogue_strs: list[str]
    start: _dt.datetime

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Availability:
        return cls(
            catalogue_strs=list(message.get("catalogue_str", ())),
            start=date_from_message(message.get("start")),
        )


@dataclass
class SalePeriod:
    start: _dt.datetime
    end: _dt.datetime
    restrictions: list[Restriction] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> SalePeriod:
        return cls(
            restrictions=[Restriction.from_message(r) for r in message.get("restriction", ())],
            start=date_from_message(message.get("start")),
            end=date_from_message(message.get("end")),
        )