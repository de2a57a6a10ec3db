"""Playback configuration values: bitrates, sample formats, normalisation and volume control."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class Bitrate(enum.Enum):
    """Streaming bitrate in kbit/s."""

    BITRATE_96 = 96
    BITRATE_160 = 160
    BITRATE_320 = 320

    @classmethod
    def parse(cls, text: str) -> Bitrate:
        """Parse ``"96"``, ``"160"`` or ``"320"``."""
        for member in cls:
            if text == str(member.value):
                return member
        raise ValueError(f"invalid bitrate: {text!r}")

    @classmethod
    def default(cls) -> Bitrate:
        return cls.BITRATE_160

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bitrate):
            return NotImplemented
        return self.value < other.value


_FORMAT_SIZES = {
    "F64": 8,
    "F32": 4,
    "S32": 4,
    "S24": 4,  # 24-bit samples padded to 32 bits
    "S24_3": 3,
    "S16": 2,
}


class AudioFormat(enum.Enum):
    """Sample format written to an audio sink."""

    F64 = "F64"
    F32 = "F32"
    S32 = "S32"
    S24 = "S24"
    S24_3 = "S24_3"
    S16 = "S16"

    @classmethod
    def parse(cls, text: str) -> AudioFormat:
        """Parse a format name, ignoring case."""
        try:
            return cls(text.upper())
        except ValueError:
            raise ValueError(f"invalid audio format: {text!r}") from None

    @classmethod
    def default(cls) -> AudioFormat:
        return cls.S16

    def size(self) -> int:
        """Number of bytes one sample occupies."""
        return _FORMAT_SIZES[self.value]


class NormalisationType(enum.Enum):
    """Which gain value normalisation uses."""

    ALBUM = "album"
    TRACK = "track"
    AUTO = "auto"

    @classmethod
    def parse(cls, text: str) -> NormalisationType:
        """Parse a normalisation type, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"invalid normalisation type: {text!r}") from None

    @classmethod
    def default(cls) -> NormalisationType:
        return cls.AUTO


class NormalisationMethod(enum.Enum):
    """How normalisation is applied."""

    BASIC = "basic"
    DYNAMIC = "dynamic"

    @classmethod
    def parse(cls, text: str) -> NormalisationMethod:
        """Parse a normalisation method, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"invalid normalisation method: {text!r}") from None

    @classmethod
    def default(cls) -> NormalisationMethod:
        return cls.DYNAMIC


class VolumeCtrlKind(enum.Enum):
    """Shape of the volume control curve."""

    CUBIC = "cubic"
    FIXED = "fixed"
    LINEAR = "linear"
    LOG = "log"


@dataclass(frozen=True)
class VolumeCtrl:
    """A volume control curve; ``db_range`` is set for cubic and log curves only."""

    kind: VolumeCtrlKind
    db_range: float | None = None

    MAX_VOLUME: ClassVar[int] = 0xFFFF
    DEFAULT_DB_RANGE: ClassVar[float] = 60.0

    @classmethod
    def parse(cls, text: str, db_range: float = DEFAULT_DB_RANGE) -> VolumeCtrl:
        """Parse a curve name, ignoring case, with the given dB range."""
        try:
            kind = VolumeCtrlKind(text.lower())
        except ValueError:
            raise ValueError(f"invalid volume control: {text!r}") from None
        if kind in (VolumeCtrlKind.CUBIC, VolumeCtrlKind.LOG):
            return cls(kind, db_range)
        return cls(kind)

    @classmethod
    def default(cls) -> VolumeCtrl:
        return cls(VolumeCtrlKind.LOG, cls.DEFAULT_DB_RANGE)