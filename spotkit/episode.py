"""Podcast episode metadata."""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.audio_files import AudioFiles
from spotkit.availability import Availability, date_from_message
from spotkit.descriptors import (
    ContentRating,
    Image,
    enum_value_or_default,
    file_id_hex,
    video_files_from_messages,
)
from spotkit.restriction import Restriction


class EpisodeType(enum.IntEnum):
    FULL = 0
    TRAILER = 1
    BONUS = 2


def _images(group: Mapping[str, Any] | None) -> list[Image]:
    return [Image.from_message(m) for m in (group or {}).get("image", ())]


@dataclass
class Episode:
    id: str
    name: str = ""
    duration: int = 0
    audio: AudioFiles = field(default_factory=AudioFiles)
    description: str = ""
    number: int = 0
    publish_time: _dt.datetime = field(default_factory=lambda: date_from_message(None))
    covers: list[Image] = field(default_factory=list)
    language: str = ""
    is_explicit: bool = False
    show_name: str = ""
    videos: list[str] = field(default_factory=list)
    video_previews: list[str] = field(default_factory=list)
    audio_previews: AudioFiles = field(default_factory=AudioFiles)
    restrictions: list[Restriction] = field(default_factory=list)
    freeze_frames: list[Image] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    allow_background_playback: bool = False
    availability: list[Availability] = field(default_factory=list)
    external_url: str = ""
    episode_type: EpisodeType = EpisodeType.FULL
    has_music_and_talk: bool = False
    content_rating: list[ContentRating] = field(default_factory=list)
    is_audiobook_chapter: bool = False

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Episode:
        return cls(
            id=file_id_hex(message.get("gid")),
            name=message.get("name", ""),
            duration=int(message.get("duration", 0)),
            audio=AudioFiles.from_messages(message.get("audio", ())),
            description=message.get("description", ""),
            number=int(message.get("number", 0)),
            publish_time=date_from_message(message.get("publish_time")),
            covers=_images(message.get("cover_image")),
            language=message.get("language", ""),
            is_explicit=bool(message.get("explicit", False)),
            show_name=(message.get("show") or {}).get("name", ""),
            videos=video_files_from_messages(message.get("video", ())),
            video_previews=video_files_from_messages(message.get("video_preview", ())),
            audio_previews=AudioFiles.from_messages(message.get("audio_preview", ())),
            restrictions=[Restriction.from_message(m) for m in message.get("restriction", ())],
            freeze_frames=_images(message.get("freeze_frame")),
            keywords=list(message.get("keyword", ())),
            allow_background_playback=bool(message.get("allow_background_playback", False)),
            availability=[Availability.from_message(m) for m in message.get("availability", ())],
            external_url=message.get("external_url", ""),
            episode_type=enum_value_or_default(EpisodeType, message.get("type")),
            has_music_and_talk=bool(message.get("music_and_talk", False)),
            content_rating=[
                ContentRating.from_message(m) for m in message.get("content_rating", ())
            ],
            is_audiobook_chapter=bool(message.get("is_audiobook_chapter", False)),
        )