"""Playlist and playlist item attributes, their updates, and permission capabilities."""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.availability import timestamp_to_date
from spotkit.descriptors import PictureSize, enum_value_or_default


class PlaylistAttributeKind(enum.IntEnum):
    LIST_UNKNOWN = 0
    LIST_NAME = 1
    LIST_DESCRIPTION = 2
    LIST_PICTURE = 3
    LIST_COLLABORATIVE = 4
    LIST_PL3_VERSION = 5
    LIST_DELETED_BY_OWNER = 6
    LIST_CLIENT_ID = 10
    LIST_FORMAT = 11
    LIST_FORMAT_ATTRIBUTES = 12
    LIST_PICTURE_SIZE = 13


class PlaylistItemAttributeKind(enum.IntEnum):
    ITEM_UNKNOWN = 0
    ITEM_ADDED_BY = 1
    ITEM_TIMESTAMP = 2
    ITEM_SEEN_AT = 9
    ITEM_PUBLIC = 10
    ITEM_FORMAT_ATTRIBUTES = 11
    ITEM_ID = 12


class PermissionLevel(enum.IntEnum):
    UNKNOWN = 0
    BLOCKED = 1
    VIEWER = 2
    CONTRIBUTOR = 3


def format_attributes_from_messages(messages: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Key/value format attributes; a repeated key keeps its last value."""
    return {message.get("key", ""): message.get("value", "") for message in messages}


@dataclass
class PlaylistAttributes:
    name: str = ""
    description: str = ""
    picture: bytes = b""
    is_collaborative: bool = False
    pl3_version: str = ""
    is_deleted_by_owner: bool = False
    client_id: str = ""
    format: str = ""
    format_attributes: dict[str, str] = field(default_factory=dict)
    picture_sizes: list[PictureSize] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistAttributes:
        return cls(
            name=message.get("name", ""),
            description=message.get("description", ""),
            picture=bytes(message.get("picture") or b""),
            is_collaborative=bool(message.get("collaborative", False)),
            pl3_version=message.get("pl3_version", ""),
            is_deleted_by_owner=bool(message.get("deleted_by_owner", False)),
            client_id=message.get("client_id", ""),
            format=message.get("format", ""),
            format_attributes=format_attributes_from_messages(
                message.get("format_attributes", ())
            ),
            picture_sizes=[PictureSize.from_message(m) for m in message.get("picture_size", ())],
        )


@dataclass
class PlaylistItemAttributes:
    added_by: str
    timestamp: _dt.datetime
    seen_at: _dt.datetime
    is_public: bool = False
    format_attributes: dict[str, str] = field(default_factory=dict)
    item_id: bytes = b""

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistItemAttributes:
        return cls(
            added_by=message.get("added_by", ""),
            timestamp=timestamp_to_date(int(message.get("timestamp", 0))),
            seen_at=timestamp_to_date(int(message.get("seen_at", 0))),
            is_public=bool(message.get("public", False)),
            format_attributes=format_attributes_from_messages(
                message.get("format_attributes", ())
            ),
            item_id=bytes(message.get("item_id") or b""),
        )


@dataclass
class PlaylistPartialAttributes:
    values: PlaylistAttributes
    no_value: list[PlaylistAttributeKind] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistPartialAttributes:
        return cls(
            values=PlaylistAttributes.from_message(message.get("values") or {}),
            no_value=[
                enum_value_or_default(PlaylistAttributeKind, v)
                for v in message.get("no_value", ())
            ],
        )


@dataclass
class PlaylistPartialItemAttributes:
    values: PlaylistItemAttributes
    no_value: list[PlaylistItemAttributeKind] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistPartialItemAttributes:
        return cls(
            values=PlaylistItemAttributes.from_message(message.get("values") or {}),
            no_value=[
                enum_value_or_default(PlaylistItemAttributeKind, v)
                for v in message.get("no_value", ())
            ],
        )


@dataclass
class PlaylistUpdateAttributes:
    new_attributes: PlaylistPartialAttributes
    old_attributes: PlaylistPartialAttributes

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistUpdateAttributes:
        return cls(
            new_attributes=PlaylistPartialAttributes.from_message(
                message.get("new_attributes") or {}
            ),
            old_attributes=PlaylistPartialAttributes.from_message(
                message.get("old_attributes") or {}
            ),
        )


@dataclass
class PlaylistUpdateItemAttributes:
    index: int
    new_attributes: PlaylistPartialItemAttributes
    old_attributes: PlaylistPartialItemAttributes

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistUpdateItemAttributes:
        return cls(
            index=int(message.get("index", 0)),
            new_attributes=PlaylistPartialItemAttributes.from_message(
                message.get("new_attributes") or {}
            ),
            old_attributes=PlaylistPartialItemAttributes.from_message(
                message.get("old_attributes") or {}
            ),
        )


@dataclass
class Capabilities:
    can_view: bool = False
    can_administrate_permissions: bool = False
    grantable_levels: list[PermissionLevel] = field(default_factory=list)
    can_edit_metadata: bool = False
    can_edit_items: bool = False
    can_cancel_membership: bool = False

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Capabilities:
        return cls(
            can_view=bool(message.get("can_view", False)),
            can_administrate_permissions=bool(message.get("can_administrate_permissions", False)),
            grantable_levels=[
                enum_value_or_default(PermissionLevel, v)
                for v in message.get("grantable_level", ())
            ],
            can_edit_metadata=bool(message.get("can_edit_metadata", False)),
            can_edit_items=bool(message.get("can_edit_items", False)),
            can_cancel_membership=bool(message.get("can_cancel_membership", False)),
        )