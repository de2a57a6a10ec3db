"""Artist metadata: top tracks, album groups, biographies and activity periods."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from spotkit.availability import Availability, SalePeriod
from spotkit.descriptors import ExternalId, Image, enum_value_or_default, file_id_hex
from spotkit.restriction import Restriction

_U16_MAX = 0xFFFF


class ArtistRole(enum.IntEnum):
    ARTIST_ROLE_UNKNOWN = 0
    ARTIST_ROLE_MAIN_ARTIST = 1
    ARTIST_ROLE_FEATURED_ARTIST = 2
    ARTIST_ROLE_REMIXER = 3
    ARTIST_ROLE_ACTOR = 4
    ARTIST_ROLE_COMPOSER = 5
    ARTIST_ROLE_CONDUCTOR = 6
    ARTIST_ROLE_ORCHESTRA = 7


def _ids(messages: Iterable[Mapping[str, Any]]) -> list[str]:
    return [file_id_hex(message.get("gid")) for message in messages]


def _images(messages: Iterable[Mapping[str, Any]]) -> list[Image]:
    return [Image.from_message(message) for message in messages]


def _u16(value: Any, name: str) -> int:
    number = int(value)
    if not 0 <= number <= _U16_MAX:
        raise ValueError(f"{name} out of range: {number}")
    return number


@dataclass
class ArtistWithRole:
    id: str
    name: str
    role: ArtistRole

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> ArtistWithRole:
        return cls(
            id=file_id_hex(message.get("artist_gid")),
            name=message.get("artist_name", ""),
            role=enum_value_or_default(ArtistRole, message.get("role")),
        )


@dataclass
class TopTracks:
    country: str
    tracks: list[str] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> TopTracks:
        return cls(
            country=message.get("country", ""),
            tracks=_ids(message.get("track", ())),
        )


class CountryTopTracks(list):
    """Top tracks per country; an entry with an empty country holds the global list."""

    def for_country(self, country: str) -> list[str]:
        """Top tracks for ``country``, else the global ones, else nothing."""
        for top in self:
            if top.country == country:
                return list(top.tracks)
        for top in self:
            if not top.country:
                return list(top.tracks)
        return []


class AlbumGroups(list):
    """Groups of album ids; each group holds the variants of one album, newest first."""

    def current_releases(self) -> Iterator[str]:
        """The latest variant of each album, skipping empty groups."""
        for group in self:
            if group:
                yield group[0]


def _album_groups(messages: Iterable[Mapping[str, Any]]) -> AlbumGroups:
    return AlbumGroups(_ids(message.get("album", ())) for message in messages)


@dataclass
class Biography:
    text: str
    portraits: list[Image] = field(default_factory=list)
    portrait_group: list[list[Image]] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Biography:
        return cls(
            text=message.get("text", ""),
            portraits=_images(message.get("portrait", ())),
            portrait_group=[
                _images(group.get("image", ())) for group in message.get("portrait_group", ())
            ],
        )


@dataclass(frozen=True)
class Timespan:
    start_year: int
    end_year: int | None = None


@dataclass(frozen=True)
class Decade:
    year: int


ActivityPeriod = Union[Timespan, Decade]


def activity_period_from_message(message: Mapping[str, Any]) -> ActivityPeriod:
    """An activity period is either a decade or a timespan with an optional end."""
    decade = message.get("decade")
    start_year = message.get("start_year")
    end_year = message.get("end_year")
    if decade is not None and start_year is None and end_year is None:
        return Decade(_u16(decade, "decade"))
    if decade is None and start_year is not None:
        return Timespan(
            start_year=_u16(start_year, "start_year"),
            end_year=None if end_year is None else _u16(end_year, "end_year"),
        )
    raise ValueError("ActivityPeriod is expected to be either a decade or timespan")


@dataclass
class Artist:
    id: str
    name: str = ""
    popularity: int = 0
    top_tracks: CountryTopTracks = field(default_factory=CountryTopTracks)
    albums: AlbumGroups = field(default_factory=AlbumGroups)
    singles: AlbumGroups = field(default_factory=AlbumGroups)
    compilations: AlbumGroups = field(default_factory=AlbumGroups)
    appears_on_albums: AlbumGroups = field(default_factory=AlbumGroups)
    genre: list[str] = field(default_factory=list)
    external_ids: list[ExternalId] = field(default_factory=list)
    portraits: list[Image] = field(default_factory=list)
    biographies: list[Biography] = field(default_factory=list)
    activity_periods: list[ActivityPeriod] = field(default_factory=list)
    restrictions: list[Restriction] = field(default_factory=list)
    related: list[Artist] = field(default_factory=list)
    is_portrait_album_cover: bool = False
    portrait_group: list[Image] = field(default_factory=list)
    sales_periods: list[SalePeriod] = field(default_factory=list)
    availabilities: list[Availability] = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> Artist:
        return cls(
            id=file_id_hex(message.get("gid")),
            name=message.get("name", ""),
            popularity=int(message.get("popularity", 0)),
            top_tracks=CountryTopTracks(
                TopTracks.from_message(m) for m in message.get("top_track", ())
            ),
            albums=_album_groups(message.get("album_group", ())),
            singles=_album_groups(message.get("single_group", ())),
            compilations=_album_groups(message.get("compilation_group", ())),
            appears_on_albums=_album_groups(message.get("appears_on_group", ())),
            genre=list(message.get("genre", ())),
            external_ids=[ExternalId.from_message(m) for m in message.get("external_id", ())],
            portraits=_images(message.get("portrait", ())),
            biographies=[Biography.from_message(m) for m in message.get("biography", ())],
            activity_periods=[
                activity_period_from_message(m) for m in message.get("activity_period", ())
            ],
            restrictions=[Restriction.from_message(m) for m in message.get("restriction", ())],
            related=[Artist.from_message(m) for m in message.get("related", ())],
            is_portrait_album_cover=bool(message.get("is_portrait_album_cover", False)),
            portrait_group=_images((message.get("portrait_group") or {}).get("image", ())),
            sales_periods=[SalePeriod.from_message(m) for m in message.get("sale_period", ())],
            availabilities=[
                Availability.from_message(m) for m in message.get("availability", ())
            ],
        )

    def albums_current(self) -> Iterator[str]:
        """Albums without older variants of the same album."""
        return self.albums.current_releases()

    def singles_current(self) -> Iterator[str]:
        """Singles without older variants of the same single."""
        return self.singles.current_releases()

    def compilations_current(self) -> Iterator[str]:
        """Compilations without older variants of the same compilation."""
        return self.compilations.current_releases()

    def appears_on_albums_current(self) -> Iterator[str]:
        """Albums the artist appears on, without older variants."""
        return self.appears_on_albums.current_releases()