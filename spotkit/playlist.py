"""Playlists as selected list contents, and playlist annotations."""

from __future__ import annotations

import datetime as _dt
import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.availability import timestamp_to_date
from spotkit.descriptors import TranscodedPicture, enum_value_or_default, file_id_hex
from spotkit.playlist_attributes import Capabilities, PlaylistAttributes
from spotkit.playlist_items import PlaylistDiff, PlaylistItemList

logger = logging.getLogger(__name__)

# Timestamps above this are too large for milliseconds and are taken as microseconds.
_MAX_MILLISECONDS = 9295169800000

_BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Geoblock(enum.IntEnum):
    GEOBLOCK_BLOCKING_TYPE_UNSPECIFIED = 0
    GEOBLOCK_BLOCKING_TYPE_TITLE = 1
    GEOBLOCK_BLOCKING_TYPE_DESCRIPTION = 2
    GEOBLOCK_BLOCKING_TYPE_IMAGE = 3


class AbuseReportState(enum.IntEnum):
    OK = 0
    TAKEN_DOWN = 1


def _to_base62(hex_id: str) -> str:
    try:
        number = int(hex_id, 16)
    except ValueError:
        raise ValueError(f"invalid playlist id: {hex_id!r}") from None
    if number >= 1 << 128:
        raise ValueError(f"playlist id too long: {hex_id!r}")
    digits = []
    for _ in range(22):
        number, rest = divmod(number, 62)
        digits.append(_BASE62[rest])
    return "".join(reversed(digits))


def annotation_uri(username: str, playlist_id: str) -> str:
    """Request URI of the annotation of a playlist (given as a hex id) for a user."""
    return (
        f"hm://playlist-annotate/v1/annotation/user/{username}"
        f"/playlist/{_to_base62(playlist_id)}"
    )


def _optional_diff(message: Mapping[str, Any] | None) -> PlaylistDiff | None:
    return None if message is None else PlaylistDiff.from_message(message)


@dataclass
class SelectedListContent:
    revision: bytes
    length: int
    attributes: PlaylistAttributes
    contents: PlaylistItemList
    diff: PlaylistDiff | None
    sync_result: PlaylistDiff | None
    resulting_revisions: list[str]
    has_multiple_heads: bool
    is_up_to_date: bool
    nonces: list[int]
    timestamp: _dt.datetime
    owner_username: str
    has_abuse_reporting: bool
    capabilities: Capabilities
    geoblocks: list[Geoblock]

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> SelectedListContent:
        timestamp = int(message.get("timestamp", 0))
        if timestamp > _MAX_MILLISECONDS:
            logger.warning("timestamp is very large; assuming it's in microseconds")
            timestamp //= 1000
        return cls(
            revision=bytes(message.get("revision") or b""),
            length=int(message.get("length", 0)),
            attributes=PlaylistAttributes.from_message(message.get("attributes") or {}),
            contents=PlaylistItemList.from_message(message.get("contents") or {}),
            diff=_optional_diff(message.get("diff")),
            sync_result=_optional_diff(message.get("sync_result")),
            resulting_revisions=[
                file_id_hex(revision) for revision in message.get("resulting_revisions", ())
            ],
            has_multiple_heads=bool(message.get("multiple_heads", False)),
            is_up_to_date=bool(message.get("up_to_date", False)),
            nonces=[int(n) for n in message.get("nonces", ())],
            timestamp=timestamp_to_date(timestamp),
            owner_username=message.get("owner_username", ""),
            has_abuse_reporting=bool(message.get("abuse_reporting_enabled", False)),
            capabilities=Capabilities.from_message(message.get("capabilities") or {}),
            geoblocks=[enum_value_or_default(Geoblock, b) for b in message.get("geoblock", ())],
        )


@dataclass
class Playlist:
    """A playlist; the id is the requested one, the username its owner's."""

    id: str
    username: str
    revision: bytes
    length: int
    attributes: PlaylistAttributes
    contents: PlaylistItemList
    diff: PlaylistDiff | None = None
    sync_result: PlaylistDiff | None = None
    resulting_revisions: list[str] = field(default_factory=list)
    has_multiple_heads: bool = False
    is_up_to_date: bool = False
    nonces: list[int] = field(default_factory=list)
    timestamp: _dt.datetime = field(default_factory=lambda: timestamp_to_date(0))
    has_abuse_reporting: bool = False
    capabilities: Capabilities = field(default_factory=Capabilities)
    geoblocks: list[Geoblock] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any], playlist_id: str) -> Playlist:
        content = SelectedListContent.from_message(message)
        return cls(
            id=playlist_id,
            username=content.owner_username,
            revision=content.revision,
            length=content.length,
            attributes=content.attributes,
            contents=content.contents,
            diff=content.diff,
            sync_result=content.sync_result,
            resulting_revisions=content.resulting_revisions,
            has_multiple_heads=content.has_multiple_heads,
            is_up_to_date=content.is_up_to_date,
            nonces=content.nonces,
            timestamp=content.timestamp,
            has_abuse_reporting=content.has_abuse_reporting,
            capabilities=content.capabilities,
            geoblocks=content.geoblocks,
        )

    def tracks(self) -> list[str]:
        """URIs of the playlist's items; a count that differs from ``length`` is logged."""
        tracks = [item.id for item in self.contents.items]
        if len(tracks) != self.length:
            logger.warning(
                "Got %d tracks, but the list should contain %d tracks.",
                len(tracks),
                self.length,
            )
        return tracks

    def name(self) -> str:
        return self.attributes.name


@dataclass
class PlaylistAnnotation:
    description: str = ""
    picture: str = ""
    transcoded_pictures: list[TranscodedPicture] = field(default_factory=list)
    has_abuse_reporting: bool = False
    abuse_report_state: AbuseReportState = AbuseReportState.OK

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistAnnotation:
        return cls(
            description=message.get("description", ""),
            picture=message.get("picture", ""),
            transcoded_pictures=[
                TranscodedPicture.from_message(m) for m in message.get("transcoded_picture", ())
            ],
            has_abuse_reporting=bool(message.get("is_abuse_reporting_enabled", False)),
            abuse_report_state=enum_value_or_default(
                AbuseReportState, message.get("abuse_report_state")
            ),
        )