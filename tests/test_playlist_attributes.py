import pytest

from spotkit.availability import timestamp_to_date
from spotkit.playlist_attributes import (
    Capabilities,
    PermissionLevel,
    PlaylistAttributeKind,
    PlaylistAttributes,
    PlaylistItemAttributeKind,
    PlaylistItemAttributes,
    PlaylistPartialAttributes,
    PlaylistPartialItemAttributes,
    PlaylistUpdateAttributes,
    PlaylistUpdateItemAttributes,
    format_attributes_from_messages,
)


def test_playlist_attributes_full():
    msg = {
        "name": "Mix",
        "description": "desc",
        "picture": b"\x01\x02",
        "collaborative": True,
        "pl3_version": "v3",
        "deleted_by_owner": True,
        "client_id": "client",
        "format": "artist-mix-reader",
        "format_attributes": [{"key": "k", "value": "v"}],
        "picture_size": [{"target_name": "large", "url": "pic"}],
    }
    attrs = PlaylistAttributes.from_message(msg)
    assert attrs.name == "Mix"
    assert attrs.picture == b"\x01\x02"
    assert attrs.is_collaborative and attrs.is_deleted_by_owner
    assert attrs.format == "artist-mix-reader"
    assert attrs.format_attributes == {"k": "v"}
    assert attrs.picture_sizes[0].target_name == "large"
    assert attrs.picture_sizes[0].url == "pic"


def test_playlist_attributes_defaults():
    attrs = PlaylistAttributes.from_message({})
    assert attrs.name == ""
    assert attrs.picture == b""
    assert attrs.format_attributes == {}


def test_format_attributes_last_wins():
    result = format_attributes_from_messages(
        [{"key": "a", "value": "1"}, {"key": "b", "value": "2"}, {"key": "a", "value": "3"}]
    )
    assert result == {"a": "3", "b": "2"}


def test_item_attributes():
    msg = {
        "added_by": "someone",
        "timestamp": 1_600_000_000_000,
        "seen_at": 1_600_000_001_000,
        "public": True,
        "item_id": b"\x09",
    }
    attrs = PlaylistItemAttributes.from_message(msg)
    assert attrs.added_by == "someone"
    assert attrs.timestamp == timestamp_to_date(1_600_000_000_000)
    assert attrs.seen_at > attrs.timestamp
    assert attrs.is_public is True
    assert attrs.item_id == b"\x09"


def test_item_attributes_defaults_to_epoch():
    attrs = PlaylistItemAttributes.from_message({})
    assert attrs.timestamp == timestamp_to_date(0)
    assert attrs.seen_at == attrs.timestamp


def test_item_attributes_bad_timestamp():
    with pytest.raises(ValueError):
        PlaylistItemAttributes.from_message({"timestamp": 10**30})


def test_partial_attributes_no_value_kinds():
    partial = PlaylistPartialAttributes.from_message(
        {"values": {"name": "N"}, "no_value": [1, 13, 999]}
    )
    assert partial.values.name == "N"
    assert partial.no_value == [
        PlaylistAttributeKind.LIST_NAME,
        PlaylistAttributeKind.LIST_PICTURE_SIZE,
        PlaylistAttributeKind.LIST_UNKNOWN,
    ]


def test_partial_item_attributes():
    partial = PlaylistPartialItemAttributes.from_message(
        {"values": {"added_by": "x"}, "no_value": [12]}
    )
    assert partial.values.added_by == "x"
    assert partial.no_value == [PlaylistItemAttributeKind.ITEM_ID]


def test_update_attributes():
    update = PlaylistUpdateAttributes.from_message(
        {"new_attributes": {"values": {"name": "new"}}, "old_attributes": {"values": {"name": "old"}}}
    )
    assert update.new_attributes.values.name == "new"
    assert update.old_attributes.values.name == "old"


def test_update_item_attributes():
    update = PlaylistUpdateItemAttributes.from_message(
        {"index": 4, "new_attributes": {"values": {"public": True}}}
    )
    assert update.index == 4
    assert update.new_attributes.values.is_public is True
    assert update.old_attributes.values.is_public is False


def test_capabilities():
    caps = Capabilities.from_message(
        {"can_view": True, "can_edit_items": True, "grantable_level": [2, 3, 42]}
    )
    assert caps.can_view and caps.can_edit_items
    assert not caps.can_administrate_permissions
    assert caps.grantable_levels == [
        PermissionLevel.VIEWER,
        PermissionLevel.CONTRIBUTOR,
        PermissionLevel.UNKNOWN,
    ]