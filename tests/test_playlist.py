import logging

import pytest

from spotkit.availability import timestamp_to_date
from spotkit.playlist import (
    AbuseReportState,
    Geoblock,
    Playlist,
    PlaylistAnnotation,
    SelectedListContent,
    annotation_uri,
)

URI_A = "spotify:track:4uLU6hMCjMI75M1A2tKUQC"
URI_B = "spotify:track:6rqhFgbbKwnb9MLmUQDhG6"
PLAYLIST_ID = "0123456789abcdef0123456789abcdef"


def _message(**extra):
    message = {
        "revision": b"\x10\x20",
        "length": 2,
        "attributes": {"name": "Road trip"},
        "contents": {"items": [{"uri": URI_A}, {"uri": URI_B}]},
        "owner_username": "owner",
        "timestamp": 1000,
    }
    message.update(extra)
    return message


def test_selected_list_content_fields():
    content = SelectedListContent.from_message(
        _message(
            multiple_heads=True,
            up_to_date=True,
            nonces=[1, 2],
            abuse_reporting_enabled=True,
            resulting_revisions=[b"\xaa", b"\xbb"],
            geoblock=[1, 3, 42],
        )
    )
    assert content.revision == b"\x10\x20"
    assert content.length == 2
    assert content.attributes.name == "Road trip"
    assert [i.id for i in content.contents.items] == [URI_A, URI_B]
    assert content.has_multiple_heads is True
    assert content.is_up_to_date is True
    assert content.nonces == [1, 2]
    assert content.has_abuse_reporting is True
    assert content.resulting_revisions == ["aa", "bb"]
    assert content.geoblocks == [
        Geoblock.GEOBLOCK_BLOCKING_TYPE_TITLE,
        Geoblock.GEOBLOCK_BLOCKING_TYPE_IMAGE,
        Geoblock.GEOBLOCK_BLOCKING_TYPE_UNSPECIFIED,
    ]
    assert content.diff is None
    assert content.sync_result is None


def test_timestamp_in_milliseconds_kept():
    content = SelectedListContent.from_message(_message(timestamp=9295169800000))
    assert content.timestamp == timestamp_to_date(9295169800000)


def test_timestamp_in_microseconds_scaled_down():
    content = SelectedListContent.from_message(_message(timestamp=9295169800001000))
    assert content.timestamp == timestamp_to_date(9295169800001)


def test_timestamp_out_of_range():
    with pytest.raises(ValueError):
        SelectedListContent.from_message(_message(timestamp=10**20))


def test_diff_and_sync_result():
    content = SelectedListContent.from_message(
        _message(diff={"to_revision": b"\x01"}, sync_result={"from_revision": b"\x02"})
    )
    assert content.diff.to_revision == "01"
    assert content.sync_result.from_revision == "02"


def test_playlist_carries_id_and_owner():
    playlist = Playlist.from_message(_message(), PLAYLIST_ID)
    assert playlist.id == PLAYLIST_ID
    assert playlist.username == "owner"
    assert playlist.name() == "Road trip"
    assert playlist.timestamp == timestamp_to_date(1000)


def test_tracks_matching_length(caplog):
    playlist = Playlist.from_message(_message(), PLAYLIST_ID)
    with caplog.at_level(logging.WARNING):
        assert playlist.tracks() == [URI_A, URI_B]
    assert not caplog.records


def test_tracks_length_mismatch_warns(caplog):
    playlist = Playlist.from_message(_message(length=5), PLAYLIST_ID)
    with caplog.at_level(logging.WARNING):
        assert playlist.tracks() == [URI_A, URI_B]
    assert any("should contain 5 tracks" in r.getMessage() for r in caplog.records)


def test_annotation():
    annotation = PlaylistAnnotation.from_message(
        {
            "description": "desc",
            "picture": "pic",
            "transcoded_picture": [{"target_name": "large", "uri": "spotify:image:ab"}],
            "is_abuse_reporting_enabled": True,
            "abuse_report_state": 1,
        }
    )
    assert annotation.description == "desc"
    assert annotation.picture == "pic"
    assert [p.target_name for p in annotation.transcoded_pictures] == ["large"]
    assert annotation.has_abuse_reporting is True
    assert annotation.abuse_report_state is AbuseReportState.TAKEN_DOWN


def test_empty_annotation():
    assert PlaylistAnnotation.from_message({}) == PlaylistAnnotation()


def test_annotation_uri_zero_id():
    uri = annotation_uri("someone", "0" * 32)
    assert uri == "hm://playlist-annotate/v1/annotation/user/someone/playlist/" + "0" * 22


def test_annotation_uri_shape():
    uri = annotation_uri("someone", PLAYLIST_ID)
    prefix = "hm://playlist-annotate/v1/annotation/user/someone/playlist/"
    assert uri.startswith(prefix)
    assert len(uri[len(prefix):]) == 22


def test_annotation_uri_rejects_bad_id():
    with pytest.raises(ValueError):
        annotation_uri("someone", "not-hex")
    with pytest.raises(ValueError):
        annotation_uri("someone", "1" + "0" * 32)