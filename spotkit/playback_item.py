"""A playable audio item built from track or episode metadata."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from spotkit.artist import ArtistWithRole
from spotkit.audio_files import AudioFiles
from spotkit.availability import Availability, UnavailabilityReason
from spotkit.descriptors import Image, ImageSize
from spotkit.episode import Episode
from spotkit.errors import ExplicitContentFilteredError, InvalidDurationError
from spotkit.restriction import Restriction
from spotkit.track import Track

DEFAULT_IMAGE_URL = "spotify:image:{file_id}"

_BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass
class UserData:
    """What is known about the logged-in user."""

    country: str = ""
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class CoverImage:
    url: str
    size: ImageSize
    width: int
    height: int


@dataclass
class TrackFields:
    artists: list[ArtistWithRole]
    album: str
    album_artists: list[str]
    popularity: int
    number: int
    disc_number: int


@dataclass
class EpisodeFields:
    description: str
    publish_time: _dt.datetime
    show_name: str


UniqueFields = Union[TrackFields, EpisodeFields]


def _to_base62(hex_id: str) -> str:
    try:
        number = int(hex_id, 16)
    except ValueError:
        raise ValueError(f"invalid item id: {hex_id!r}") from None
    if number >= 1 << 128:
        raise ValueError(f"item id too long: {hex_id!r}")
    digits = []
    for _ in range(22):
        number, rest = divmod(number, 62)
        digits.append(_BASE62[rest])
    return "".join(reversed(digits))


def _to_uri(item_type: str, hex_id: str) -> str:
    return f"spotify:{item_type}:{_to_base62(hex_id)}"


def _image_template(user: UserData, image_url: str | None) -> str:
    if image_url is not None:
        return image_url
    return user.attributes.get("image-url", DEFAULT_IMAGE_URL)


def _now(now: _dt.datetime | None) -> _dt.datetime:
    return now if now is not None else _dt.datetime.now(_dt.timezone.utc)


def get_covers(covers: Iterable[Image], image_url: str) -> list[CoverImage]:
    """Covers widest first, with their URLs filled in; covers without an id are dropped."""
    ordered = sorted(covers, key=lambda cover: cover.width, reverse=True)
    return [
        CoverImage(
            url=image_url.replace("{file_id}", cover.id),
            size=cover.size,
            width=cover.width,
            height=cover.height,
        )
        for cover in ordered
        if cover.id
    ]


def allowed_for_user(
    user: UserData, restrictions: Iterable[Restriction]
) -> UnavailabilityReason | None:
    """Check the country restrictions that apply to the user's catalogue."""
    catalogue = user.attributes.get("catalogue", "premium")
    for restriction in restrictions:
        if catalogue not in restriction.catalogue_strs:
            continue
        # A restriction carries either a whitelist or a blacklist, never both.
        if restriction.countries_allowed is not None:
            if user.country in restriction.countries_allowed:
                return None
            return UnavailabilityReason.NOT_WHITELISTED
        if restriction.countries_forbidden is not None:
            if user.country in restriction.countries_forbidden:
                return UnavailabilityReason.BLACKLISTED
            return None
    return None


def available(
    availabilities: Iterable[Availability], now: _dt.datetime | None = None
) -> UnavailabilityReason | None:
    """An item without availability windows is available; otherwise one must have started."""
    windows = list(availabilities)
    if not windows:
        return None
    moment = _now(now)
    if not any(moment >= window.start for window in windows):
        return UnavailabilityReason.EMBARGO
    return None


def available_for_user(
    user: UserData,
    availabilities: Iterable[Availability],
    restrictions: Iterable[Restriction],
    now: _dt.datetime | None = None,
) -> UnavailabilityReason | None:
    """``None`` when the item can be played by the user, else the reason it cannot."""
    return available(availabilities, now) or allowed_for_user(user, restrictions)


@dataclass
class AudioItem:
    """A playable item; ``availability`` is ``None`` when it can be played."""

    track_id: str
    uri: str
    files: AudioFiles
    name: str
    covers: list[CoverImage]
    language: list[str]
    duration_ms: int
    is_explicit: bool
    availability: UnavailabilityReason | None
    alternatives: list[str] | None
    unique_fields: UniqueFields

    @classmethod
    def from_track(
        cls,
        track: Track,
        user: UserData,
        filter_explicit: bool = False,
        image_url: str | None = None,
        now: _dt.datetime | None = None,
    ) -> AudioItem:
        if track.duration <= 0:
            raise InvalidDurationError(track.duration)
        if track.is_explicit and filter_explicit:
            raise ExplicitContentFilteredError()

        moment = _now(now)
        uri = _to_uri("track", track.id)
        covers = get_covers(track.album.covers, _image_template(user, image_url))
        if moment < track.earliest_live_timestamp:
            availability: UnavailabilityReason | None = UnavailabilityReason.EMBARGO
        else:
            availability = available_for_user(
                user, track.availability, track.restrictions, moment
            )

        fields = TrackFields(
            artists=list(track.artists_with_role),
            album=track.album.name,
            album_artists=[artist.name for artist in track.album.artists],
            popularity=min(max(track.popularity, 0), 100),
            number=max(track.number, 0),
            disc_number=max(track.disc_number, 0),
        )
        return cls(
            track_id=track.id,
            uri=uri,
            files=track.files,
            name=track.name,
            covers=covers,
            language=list(track.language_of_performance),
            duration_ms=track.duration,
            is_explicit=track.is_explicit,
            availability=availability,
            alternatives=list(track.alternatives) or None,
            unique_fields=fields,
        )

    @classmethod
    def from_episode(
        cls,
        episode: Episode,
        user: UserData,
        filter_explicit: bool = False,
        image_url: str | None = None,
        now: _dt.datetime | None = None,
    ) -> AudioItem:
        if episode.duration <= 0:
            raise InvalidDurationError(episode.duration)
        if episode.is_explicit and filter_explicit:
            raise ExplicitContentFilteredError()

        uri = _to_uri("episode", episode.id)
        covers = get_covers(episode.covers, _image_template(user, image_url))
        availability = available_for_user(
            user, episode.availability, episode.restrictions, _now(now)
        )
        fields = EpisodeFields(
            description=episode.description,
            publish_time=episode.publish_time,
            show_name=episode.show_name,
        )
        return cls(
            track_id=episode.id,
            uri=uri,
            files=episode.audio,
            name=episode.name,
            covers=covers,
            language=[episode.language],
            duration_ms=episode.duration,
            is_explicit=episode.is_explicit,
            availability=availability,
            alternatives=None,
            unique_fields=fields,
        )