"""Audio files of a track or episode, keyed by their encoding format."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from spotkit.descriptors import enum_value_or_default, file_id_hex

logger = logging.getLogger(__name__)


class AudioFileFormat(enum.IntEnum):
    OGG_VORBIS_96 = 0
    OGG_VORBIS_160 = 1
    OGG_VORBIS_320 = 2
    MP3_256 = 3
    MP3_320 = 4
    MP3_160 = 5
    MP3_96 = 6
    MP3_160_ENC = 7
    AAC_24 = 8
    AAC_48 = 9
    MP4_128 = 10
    MP4_128_DUAL = 11
    MP4_128_CBCS = 12
    MP4_256 = 13
    MP4_256_DUAL = 14
    MP4_256_CBCS = 15
    FLAC_FLAC = 16
    MP4_FLAC = 17


_OGG_VORBIS = frozenset(
    {AudioFileFormat.OGG_VORBIS_320, AudioFileFormat.OGG_VORBIS_160, AudioFileFormat.OGG_VORBIS_96}
)
_MP3 = frozenset(
    {
        AudioFileFormat.MP3_320,
        AudioFileFormat.MP3_256,
        AudioFileFormat.MP3_160,
        AudioFileFormat.MP3_96,
        AudioFileFormat.MP3_160_ENC,
    }
)


def is_ogg_vorbis(audio_format: AudioFileFormat) -> bool:
    return audio_format in _OGG_VORBIS


def is_mp3(audio_format: AudioFileFormat) -> bool:
    return audio_format in _MP3


def is_flac(audio_format: AudioFileFormat) -> bool:
    return audio_format is AudioFileFormat.FLAC_FLAC


class AudioFiles(dict):
    """Mapping of :class:`AudioFileFormat` to hex file id."""

    @classmethod
    def from_messages(cls, messages: Iterable[Mapping[str, Any]]) -> AudioFiles:
        """Collect files that state their format; files without one are skipped."""
        files = cls()
        for message in messages:
            file_id = file_id_hex(message.get("file_id"))
            raw_format = message.get("format")
            if raw_format is None:
                logger.debug("Ignoring file <%s> with unspecified format", file_id)
                continue
            files[enum_value_or_default(AudioFileFormat, raw_format)] = file_id
        return files