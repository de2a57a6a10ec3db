"""Lyrics as delivered by the lyrics service in JSON form."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


class SyncType(enum.Enum):
    UNSYNCED = "UNSYNCED"
    LINE_SYNCED = "LINE_SYNCED"


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"expected an object holding `{key}`, got {type(obj).__name__}")
    if key not in obj:
        raise ValueError(f"missing field `{key}`")
    return obj[key]


def _str(obj: Any, key: str) -> str:
    value = _field(obj, key)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _bool(obj: Any, key: str) -> bool:
    value = _field(obj, key)
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}` must be a boolean")
    return value


def _i32(obj: Any, key: str) -> int:
    value = _field(obj, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"field `{key}` out of range: {value}")
    return value


@dataclass
class Colors:
    background: int
    highlight_text: int
    text: int

    @classmethod
    def _from_obj(cls, obj: Any) -> Colors:
        return cls(_i32(obj, "background"), _i32(obj, "highlightText"), _i32(obj, "text"))


@dataclass
class Line:
    start_time_ms: str
    end_time_ms: str
    words: str

    @classmethod
    def _from_obj(cls, obj: Any) -> Line:
        return cls(_str(obj, "startTimeMs"), _str(obj, "endTimeMs"), _str(obj, "words"))


@dataclass
class LyricsInner:
    fullscreen_action: str
    is_dense_typeface: bool
    is_rtl_language: bool
    language: str
    lines: list[Line]
    provider: str
    provider_display_name: str
    provider_lyrics_id: str
    sync_lyrics_uri: str
    sync_type: SyncType

    @classmethod
    def _from_obj(cls, obj: Any) -> LyricsInner:
        lines = _field(obj, "lines")
        if not isinstance(lines, list):
            raise ValueError("field `lines` must be an array")
        sync_type = _str(obj, "syncType")
        try:
            parsed_sync = SyncType(sync_type)
        except ValueError:
            raise ValueError(f"unknown sync type: {sync_type!r}") from None
        return cls(
            fullscreen_action=_str(obj, "fullscreenAction"),
            is_dense_typeface=_bool(obj, "isDenseTypeface"),
            is_rtl_language=_bool(obj, "isRtlLanguage"),
            language=_str(obj, "language"),
            lines=[Line._from_obj(line) for line in lines],
            provider=_str(obj, "provider"),
            provider_display_name=_str(obj, "providerDisplayName"),
            provider_lyrics_id=_str(obj, "providerLyricsId"),
            sync_lyrics_uri=_str(obj, "syncLyricsUri"),
            sync_type=parsed_sync,
        )


@dataclass
class Lyrics:
    colors: Colors
    has_vocal_removal: bool
    lyrics: LyricsInner

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> Lyrics:
        """Parse a lyrics document; raise ``ValueError`` if it is malformed."""
        obj = json.loads(data)
        return cls(
            colors=Colors._from_obj(_field(obj, "colors")),
            has_vocal_removal=_bool(obj, "hasVocalRemoval"),
            lyrics=LyricsInner._from_obj(_field(obj, "lyrics")),
        )