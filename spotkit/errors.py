"""Errors raised while fetching or interpreting metadata."""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for metadata failures."""


class EmptyResponseError(MetadataError):
    """The server answered without any payload."""

    def __init__(self) -> None:
        super().__init__("empty response")


class NonPlayableError(MetadataError):
    """The requested item is not a playable audio item."""

    def __init__(self) -> None:
        super().__init__("audio item is non-playable when it should be")


class InvalidDurationError(MetadataError):
    """The audio item reports a duration that cannot be played."""

    def __init__(self, duration: int) -> None:
        super().__init__(f"audio item duration can not be: {duration}")
        self.duration = duration


class ExplicitContentFilteredError(MetadataError):
    """The item is explicit and the client is set to filter explicit content."""

    def __init__(self) -> None:
        super().__init__("track is marked as explicit, which client setting forbids")