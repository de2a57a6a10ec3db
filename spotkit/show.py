"""Podcast and audiobook show metadata."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.availability import Availability
from spotkit.descriptors import Copyright, Image, enum_value_or_default, file_id_hex
from spotkit.restriction import Restriction


class ShowMediaType(enum.IntEnum):
    MIXED = 0
    AUDIO = 1
    VIDEO = 2


class ShowConsumptionOrder(enum.IntEnum):
    SEQUENTIAL = 1
    EPISODIC = 2
    RECENT = 3


@dataclass
class Show:
    id: str
    name: str = ""
    description: str = ""
    publisher: str = ""
    language: str = ""
    is_explicit: bool = False
    covers: list[Image] = field(default_factory=list)
    episodes: list[str] = field(default_factory=list)
    copyrights: list[Copyright] = field(default_factory=list)
    restrictions: list[Restriction] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    media_type: ShowMediaType = ShowMediaType.MIXED
    consumption_order: ShowConsumptionOrder = ShowConsumptionOrder.SEQUENTIAL
    availability: list[Availability] = field(default_factory=list)
    trailer_uri: str = ""
    has_music_and_talk: bool = False
    is_audiobook: bool = False

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Show:
        cover_image = message.get("cover_image") or {}
        return cls(
            id=file_id_hex(message.get("gid")),
            name=message.get("name", ""),
            description=message.get("description", ""),
            publisher=message.get("publisher", ""),
            language=message.get("language", ""),
            is_explicit=bool(message.get("explicit", False)),
            covers=[Image.from_message(m) for m in cover_image.get("image", ())],
            episodes=[file_id_hex(m.get("gid")) for m in message.get("episode", ())],
            copyrights=[Copyright.from_message(m) for m in message.get("copyright", ())],
            restrictions=[Restriction.from_message(m) for m in message.get("restriction", ())],
            keywords=list(message.get("keyword", ())),
            media_type=enum_value_or_default(ShowMediaType, message.get("media_type")),
            consumption_order=enum_value_or_default(
                ShowConsumptionOrder, message.get("consumption_order")
            ),
            availability=[Availability.from_message(m) for m in message.get("availability", ())],
            trailer_uri=message.get("trailer_uri", ""),
            has_music_and_talk=bool(message.get("music_and_talk", False)),
            is_audiobook=bool(message.get("is_audiobook", False)),
        )