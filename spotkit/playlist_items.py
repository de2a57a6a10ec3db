"""Playlist items, meta items, operations and diffs between revisions."""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from spotkit.availability import timestamp_to_date
from spotkit.descriptors import enum_value_or_default, file_id_hex
from spotkit.playlist_attributes import (
    Capabilities,
    PlaylistAttributes,
    PlaylistItemAttributes,
    PlaylistUpdateAttributes,
    PlaylistUpdateItemAttributes,
)


class PlaylistOperationKind(enum.IntEnum):
    KIND_UNKNOWN = 0
    ADD = 2
    REM = 3
    MOV = 4
    UPDATE_ITEM_ATTRIBUTES = 5
    UPDATE_LIST_ATTRIBUTES = 6


def _items(messages: Iterable[Mapping[str, Any]]) -> list[PlaylistItem]:
    return [PlaylistItem.from_message(m) for m in messages]


@dataclass
class PlaylistItem:
    """One entry of a playlist; ``id`` is the item's URI."""

    id: str
    attributes: PlaylistItemAttributes

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistItem:
        return cls(
            id=message.get("uri", ""),
            attributes=PlaylistItemAttributes.from_message(message.get("attributes") or {}),
        )


@dataclass
class PlaylistMetaItem:
    revision: str
    attributes: PlaylistAttributes
    length: int
    timestamp: _dt.datetime
    owner_username: str = ""
    has_abuse_reporting: bool = False
    capabilities: Capabilities = field(default_factory=Capabilities)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistMetaItem:
        return cls(
            revision=file_id_hex(message.get("revision")),
            attributes=PlaylistAttributes.from_message(message.get("attributes") or {}),
            length=int(message.get("length", 0)),
            timestamp=timestamp_to_date(int(message.get("timestamp", 0))),
            owner_username=message.get("owner_username", ""),
            has_abuse_reporting=bool(message.get("abuse_reporting_enabled", False)),
            capabilities=Capabilities.from_message(message.get("capabilities") or {}),
        )


@dataclass
class PlaylistItemList:
    position: int = 0
    is_truncated: bool = False
    items: list[PlaylistItem] = field(default_factory=list)
    meta_items: list[PlaylistMetaItem] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistItemList:
        return cls(
            position=int(message.get("pos", 0)),
            is_truncated=bool(message.get("truncated", False)),
            items=_items(message.get("items", ())),
            meta_items=[PlaylistMetaItem.from_message(m) for m in message.get("meta_items", ())],
        )


@dataclass
class PlaylistOperationAdd:
    from_index: int = 0
    items: list[PlaylistItem] = field(default_factory=list)
    add_last: bool = False
    add_first: bool = False

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistOperationAdd:
        return cls(
            from_index=int(message.get("from_index", 0)),
            items=_items(message.get("items", ())),
            add_last=bool(message.get("add_last", False)),
            add_first=bool(message.get("add_first", False)),
        )


@dataclass
class PlaylistOperationMove:
    from_index: int = 0
    length: int = 0
    to_index: int = 0

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistOperationMove:
        return cls(
            from_index=int(message.get("from_index", 0)),
            length=int(message.get("length", 0)),
            to_index=int(message.get("to_index", 0)),
        )


@dataclass
class PlaylistOperationRemove:
    from_index: int = 0
    length: int = 0
    items: list[PlaylistItem] = field(default_factory=list)
    has_items_as_key: bool = False

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistOperationRemove:
        return cls(
            from_index=int(message.get("from_index", 0)),
            length=int(message.get("length", 0)),
            items=_items(message.get("items", ())),
            has_items_as_key=bool(message.get("items_as_key", False)),
        )


@dataclass
class PlaylistOperation:
    kind: PlaylistOperationKind
    add: PlaylistOperationAdd
    rem: PlaylistOperationRemove
    mov: PlaylistOperationMove
    update_item_attributes: PlaylistUpdateItemAttributes
    update_list_attributes: PlaylistUpdateAttributes

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistOperation:
        return cls(
            kind=enum_value_or_default(PlaylistOperationKind, message.get("kind")),
            add=PlaylistOperationAdd.from_message(message.get("add") or {}),
            rem=PlaylistOperationRemove.from_message(message.get("rem") or {}),
            mov=PlaylistOperationMove.from_message(message.get("mov") or {}),
            update_item_attributes=PlaylistUpdateItemAttributes.from_message(
                message.get("update_item_attributes") or {}
            ),
            update_list_attributes=PlaylistUpdateAttributes.from_message(
                message.get("update_list_attributes") or {}
            ),
        )


@dataclass
class PlaylistDiff:
    from_revision: str
    operations: list[PlaylistOperation]
    to_revision: str

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> PlaylistDiff:
        return cls(
            from_revision=file_id_hex(message.get("from_revision")),
            operations=[PlaylistOperation.from_message(m) for m in message.get("ops", ())],
            to_revision=file_id_hex(message.get("to_revision")),
        )