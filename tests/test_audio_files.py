import pytest

from spotkit.audio_files import AudioFileFormat, AudioFiles, is_flac, is_mp3, is_ogg_vorbis


def test_from_messages_skips_missing_format():
    ogg = bytes([1]) * 20
    unknown = bytes([2]) * 20
    files = AudioFiles.from_messages(
        [{"file_id": ogg, "format": 1}, {"file_id": unknown}]
    )
    assert list(files) == [AudioFileFormat.OGG_VORBIS_160]
    assert bytes.fromhex(files[AudioFileFormat.OGG_VORBIS_160]) == ogg


def test_from_messages_later_file_wins():
    first = bytes([3]) * 20
    second = bytes([4]) * 20
    files = AudioFiles.from_messages(
        [{"file_id": first, "format": 4}, {"file_id": second, "format": 4}]
    )
    assert len(files) == 1
    assert bytes.fromhex(files[AudioFileFormat.MP3_320]) == second


def test_from_messages_empty():
    assert AudioFiles.from_messages([]) == {}


@pytest.mark.parametrize("fmt", list(AudioFileFormat))
def test_format_families_are_disjoint(fmt):
    assert sum([is_ogg_vorbis(fmt), is_mp3(fmt), is_flac(fmt)]) <= 1


def test_ogg_vorbis_formats():
    assert is_ogg_vorbis(AudioFileFormat.OGG_VORBIS_320)
    assert not is_ogg_vorbis(AudioFileFormat.MP3_320)


def test_mp3_formats():
    assert is_mp3(AudioFileFormat.MP3_160_ENC)
    assert not is_mp3(AudioFileFormat.AAC_24)


def test_flac_format():
    assert is_flac(AudioFileFormat.FLAC_FLAC)
    assert not is_flac(AudioFileFormat.MP4_FLAC)