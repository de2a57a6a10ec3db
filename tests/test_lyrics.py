import copy
import json

import pytest

from spotkit.lyrics import Colors, Line, Lyrics, SyncType

SAMPLE = {
    "colors": {"background": -9079435, "highlightText": -1, "text": -16777216},
    "hasVocalRemoval": False,
    "lyrics": {
        "fullscreenAction": "FULLSCREEN_LYRICS",
        "isDenseTypeface": False,
        "isRtlLanguage": False,
        "language": "en",
        "lines": [
            {"startTimeMs": "1000", "endTimeMs": "0", "words": "first line", "syllables": []},
            {"startTimeMs": "2500", "endTimeMs": "0", "words": "second line"},
        ],
        "provider": "Sample",
        "providerDisplayName": "Sample Provider",
        "providerLyricsId": "123",
        "syncLyricsUri": "",
        "syncType": "LINE_SYNCED",
        "alternatives": [],
    },
}


def test_parse_sample():
    lyrics = Lyrics.from_json(json.dumps(SAMPLE))
    assert lyrics.colors == Colors(-9079435, -1, -16777216)
    assert lyrics.has_vocal_removal is False
    assert lyrics.lyrics.sync_type is SyncType.LINE_SYNCED
    assert lyrics.lyrics.lines == [
        Line("1000", "0", "first line"),
        Line("2500", "0", "second line"),
    ]
    assert lyrics.lyrics.provider_display_name == "Sample Provider"


def test_parse_bytes_equals_parse_text():
    text = json.dumps(SAMPLE)
    assert Lyrics.from_json(text.encode()) == Lyrics.from_json(text)


def test_unsynced():
    data = copy.deepcopy(SAMPLE)
    data["lyrics"]["syncType"] = "UNSYNCED"
    assert Lyrics.from_json(json.dumps(data)).lyrics.sync_type is SyncType.UNSYNCED


def test_missing_field():
    data = copy.deepcopy(SAMPLE)
    del data["lyrics"]["language"]
    with pytest.raises(ValueError, match="language"):
        Lyrics.from_json(json.dumps(data))


def test_unknown_sync_type():
    data = copy.deepcopy(SAMPLE)
    data["lyrics"]["syncType"] = "SYLLABLE_SYNCED"
    with pytest.raises(ValueError):
        Lyrics.from_json(json.dumps(data))


def test_bool_not_accepted_as_integer():
    data = copy.deepcopy(SAMPLE)
    data["colors"]["text"] = True
    with pytest.raises(ValueError):
        Lyrics.from_json(json.dumps(data))


def test_invalid_json():
    with pytest.raises(ValueError):
        Lyrics.from_json("{not json")