import datetime as dt

import pytest

from spotkit.audio_files import AudioFileFormat
from spotkit.episode import Episode, EpisodeType

GID_A = bytes(range(16))
GID_B = bytes(range(16, 32))
GID_C = bytes(range(32, 48))


def test_episode_fields():
    episode = Episode.from_message(
        {
            "gid": GID_A,
            "name": "Episode",
            "duration": 60000,
            "description": "About things",
            "number": 7,
            "publish_time": {"year": 2020, "month": 2, "day": 3, "hour": 4, "minute": 5},
            "language": "en",
            "explicit": True,
            "show": {"name": "The Show"},
            "cover_image": {"image": [{"file_id": GID_B, "width": 640}]},
            "freeze_frame": {"image": [{"file_id": GID_C}]},
            "keyword": ["talk"],
            "external_url": "https://example.com/episode",
            "type": 1,
            "music_and_talk": True,
            "is_audiobook_chapter": True,
        }
    )
    assert episode.id == GID_A.hex()
    assert episode.name == "Episode"
    assert episode.duration == 60000
    assert episode.description == "About things"
    assert episode.number == 7
    assert episode.publish_time == dt.datetime(2020, 2, 3, 4, 5, tzinfo=dt.timezone.utc)
    assert episode.language == "en"
    assert episode.is_explicit is True
    assert episode.show_name == "The Show"
    assert [c.id for c in episode.covers] == [GID_B.hex()]
    assert [f.id for f in episode.freeze_frames] == [GID_C.hex()]
    assert episode.keywords == ["talk"]
    assert episode.external_url == "https://example.com/episode"
    assert episode.episode_type is EpisodeType.TRAILER
    assert episode.has_music_and_talk is True
    assert episode.is_audiobook_chapter is True


def test_episode_audio_and_videos():
    episode = Episode.from_message(
        {
            "gid": GID_A,
            "audio": [{"file_id": GID_B, "format": 4}],
            "audio_preview": [{"file_id": GID_C}],
            "video": [{"file_id": GID_B}, {"file_id": GID_C}],
            "video_preview": [{"file_id": GID_C}],
        }
    )
    assert dict(episode.audio) == {AudioFileFormat.MP3_320: GID_B.hex()}
    assert dict(episode.audio_previews) == {}
    assert episode.videos == [GID_B.hex(), GID_C.hex()]
    assert episode.video_previews == [GID_C.hex()]


def test_episode_defaults():
    episode = Episode.from_message({"gid": GID_A})
    assert episode.episode_type is EpisodeType.FULL
    assert episode.show_name == ""
    assert episode.covers == []


def test_episode_invalid_publish_time_raises():
    with pytest.raises(ValueError):
        Episode.from_message({"gid": GID_A, "publish_time": {"year": 2020, "day": 40}})