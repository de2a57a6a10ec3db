"""Album metadata."""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.artist import Artist
from spotkit.availability import Availability, SalePeriod, date_from_message
from spotkit.descriptors import Copyright, ExternalId, Image, enum_value_or_default, file_id_hex
from spotkit.restriction import Restriction


class AlbumType(enum.IntEnum):
    ALBUM = 1
    SINGLE = 2
    COMPILATION = 3
    EP = 4
    AUDIOBOOK = 5
    PODCAST = 6


@dataclass
class Disc:
    number: int
    name: str
    tracks: list[str] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Disc:
        return cls(
            number=int(message.get("number", 0)),
            name=message.get("name", ""),
            tracks=[file_id_hex(t.get("gid")) for t in message.get("track", ())],
        )


def _images(group: Mapping[str, Any] | None) -> list[Image]:
    return [Image.from_message(m) for m in (group or {}).get("image", ())]


@dataclass
class Album:
    id: str
    name: str = ""
    artists: list[Artist] = field(default_factory=list)
    album_type: AlbumType = AlbumType.ALBUM
    label: str = ""
    date: _dt.datetime = field(default_factory=lambda: date_from_message(None))
    popularity: int = 0
    genres: list[str] = field(default_factory=list)
    covers: list[Image] = field(default_factory=list)
    external_ids: list[ExternalId] = field(default_factory=list)
    discs: list[Disc] = field(default_factory=list)
    reviews: list[str] = field(default_factory=list)
    copyrights: list[Copyright] = field(default_factory=list)
    restrictions: list[Restriction] = field(default_factory=list)
    related: list[str] = field(default_factory=list)
    sale_periods: list[SalePeriod] = field(default_factory=list)
    cover_group: list[Image] = field(default_factory=list)
    original_title: str = ""
    version_title: str = ""
    type_str: str = ""
    availability: list[Availability] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Album:
        cover_group = message.get("cover_group")
        return cls(
            id=file_id_hex(message.get("gid")),
            name=message.get("name", ""),
            artists=[Artist.from_message(m) for m in message.get("artist", ())],
            album_type=enum_value_or_default(AlbumType, message.get("type")),
            label=message.get("label", ""),
            date=date_from_message(message.get("date")),
            popularity=int(message.get("popularity", 0)),
            genres=list(message.get("genre", ())),
            covers=_images(cover_group),
            external_ids=[ExternalId.from_message(m) for m in message.get("external_id", ())],
            discs=[Disc.from_message(m) for m in message.get("disc", ())],
            reviews=list(message.get("review", ())),
            copyrights=[Copyright.from_message(m) for m in message.get("copyright", ())],
            restrictions=[Restriction.from_message(m) for m in message.get("restriction", ())],
            related=[file_id_hex(m.get("gid")) for m in message.get("related", ())],
            sale_periods=[SalePeriod.from_message(m) for m in message.get("sale_period", ())],
            cover_group=_images(cover_group),
            original_title=message.get("original_title", ""),
            version_title=message.get("version_title", ""),
            type_str=message.get("type_str", ""),
            availability=[Availability.from_message(m) for m in message.get("availability", ())],
        )

    def tracks(self) -> Iterator[str]:
        """Track ids of every disc, in disc order."""
        for disc in self.discs:
            yield from disc.tracks