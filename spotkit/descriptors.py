"""Small metadata records: content ratings, copyrights, external ids, images and videos.

Protocol messages are given as mappings of field names to values; a missing
field takes the protocol default.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

E = TypeVar("E", bound=enum.Enum)


def enum_value_or_default(enum_cls: type[E], value: Any) -> E:
    """Map a raw protocol value onto ``enum_cls``; unknown or missing values give its first member."""
    try:
        return enum_cls(value)
    except ValueError:
        return next(iter(enum_cls))


def file_id_hex(raw: bytes | bytearray | None) -> str:
    """Render a raw file id as lower-case hex; an absent id gives the empty string."""
    return bytes(raw or b"").hex()


class ImageSize(enum.IntEnum):
    DEFAULT = 0
    SMALL = 1
    LARGE = 2
    XLARGE = 3


class CopyrightType(enum.IntEnum):
    P = 0
    C = 1


@dataclass
class ContentRating:
    country: str
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> ContentRating:
        return cls(
            country=message.get("country", ""),
            tags=list(message.get("tag", ())),
        )


@dataclass
class Copyright:
    copyright_type: CopyrightType
    text: str

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Copyright:
        return cls(
            copyright_type=enum_value_or_default(CopyrightType, message.get("type")),
            text=message.get("text", ""),
        )


@dataclass
class ExternalId:
    external_type: str
    id: str  # a URL, an ISRC, an EAN, a UPC, ...

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> ExternalId:
        return cls(
            external_type=message.get("type", ""),
            id=message.get("id", ""),
        )


@dataclass
class Image:
    id: str
    size: ImageSize
    width: int
    height: int

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Image:
        return cls(
            id=file_id_hex(message.get("file_id")),
            size=enum_value_or_default(ImageSize, message.get("size")),
            width=int(message.get("width", 0)),
            height=int(message.get("height", 0)),
        )


@dataclass
class PictureSize:
    target_name: str
    url: str

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PictureSize:
        return cls(
            target_name=message.get("target_name", ""),
            url=message.get("url", ""),
        )


@dataclass
class TranscodedPicture:
    target_name: str
    uri: str

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> TranscodedPicture:
        return cls(
            target_name=message.get("target_name", ""),
            uri=message.get("uri", ""),
        )


def video_files_from_messages(messages: Iterable[Mapping[str, Any]]) -> list[str]:
    """File ids of the given video file messages, in order."""
    return [file_id_hex(message.get("file_id")) for message in messages]