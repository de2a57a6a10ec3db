"""Track metadata."""

from __future__ import annotations

import datetime as _dt
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.album import Album
from spotkit.artist import Artist, ArtistWithRole
from spotkit.audio_files import AudioFiles
from spotkit.availability import Availability, SalePeriod, timestamp_to_date
from spotkit.descriptors import ContentRating, ExternalId, file_id_hex
from spotkit.restriction import Restriction


def _licensor(message: Mapping[str, Any] | None) -> uuid.UUID:
    raw = (message or {}).get("uuid") or b""
    try:
        return uuid.UUID(bytes=bytes(raw))
    except ValueError:
        return uuid.UUID(int=0)


@dataclass
class Track:
    id: str
    name: str
    album: Album
    artists: list[Artist] = field(default_factory=list)
    number: int = 0
    disc_number: int = 0
    duration: int = 0
    popularity: int = 0
    is_explicit: bool = False
    external_ids: list[ExternalId] = field(default_factory=list)
    restrictions: list[Restriction] = field(default_factory=list)
    files: AudioFiles = field(default_factory=AudioFiles)
    alternatives: list[str] = field(default_factory=list)
    sale_periods: list[SalePeriod] = field(default_factory=list)
    previews: AudioFiles = field(default_factory=AudioFiles)
    tags: list[str] = field(default_factory=list)
    earliest_live_timestamp: _dt.datetime = field(default_factory=lambda: timestamp_to_date(0))
    has_lyrics: bool = False
    availability: list[Availability] = field(default_factory=list)
    licensor: uuid.UUID = field(default_factory=lambda: uuid.UUID(int=0))
    language_of_performance: list[str] = field(default_factory=list)
    content_ratings: list[ContentRating] = field(default_factory=list)
    original_title: str = ""
    version_title: str = ""
    artists_with_role: list[ArtistWithRole] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Track:
        return cls(
            id=file_id_hex(message.get("gid")),
            name=message.get("name", ""),
            album=Album.from_message(message.get("album") or {}),
            artists=[Artist.from_message(m) for m in message.get("artist", ())],
            number=int(message.get("number", 0)),
            disc_number=int(message.get("disc_number", 0)),
            duration=int(message.get("duration", 0)),
            popularity=int(message.get("popularity", 0)),
            is_explicit=bool(message.get("explicit", False)),
            external_ids=[ExternalId.from_message(m) for m in message.get("external_id", ())],
            restrictions=[Restriction.from_message(m) for m in message.get("restriction", ())],
            files=AudioFiles.from_messages(message.get("file", ())),
            alternatives=[file_id_hex(m.get("gid")) for m in message.get("alternative", ())],
            sale_periods=[SalePeriod.from_message(m) for m in message.get("sale_period", ())],
            previews=AudioFiles.from_messages(message.get("preview", ())),
            tags=list(message.get("tags", ())),
            earliest_live_timestamp=timestamp_to_date(
                int(message.get("earliest_live_timestamp", 0))
            ),
            has_lyrics=bool(message.get("has_lyrics", False)),
            availability=[Availability.from_message(m) for m in message.get("availability", ())],
            licensor=_licensor(message.get("licensor")),
            language_of_performance=list(message.get("language_of_performance", ())),
            content_ratings=[
                ContentRating.from_message(m) for m in message.get("content_rating", ())
            ],
            original_title=message.get("original_title", ""),
            version_title=message.get("version_title", ""),
            artists_with_role=[
                ArtistWithRole.from_message(m) for m in message.get("artist_with_role", ())
            ],
        )