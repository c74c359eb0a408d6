"""Stored SoundCloud records and the playlist/track responses built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

from tunedomain.models.music_api import (
    _INT32,
    _INT64,
    _OPT_INT32,
    _OPT_TEXT,
    _TEXT,
    _UINT32,
    ApiArtist,
    ApiPlaylist,
    ApiServices,
    ApiTrack,
    _Entry,
    _nested,
    _nested_list,
    _parse,
)

T = TypeVar("T")


@dataclass
class AuthorInputSoundcloud(_Entry):
    """Author row handed to the store."""


@dataclass
class TrackInputSoundcloud:
    id: int
    title: str
    duration: int
    img: Optional[str]
    author_id: int


@dataclass
class PlaylistInputSoundcloud:
    id: int
    title: str
    img: Optional[str]
    author_id: int


@dataclass
class CreateReplacePlaylistInput:
    playlist: PlaylistInputSoundcloud
    playlist_author: AuthorInputSoundcloud
    tracks: list[TrackInputSoundcloud] = field(default_factory=list)
    track_authors: list[AuthorInputSoundcloud] = field(default_factory=list)


@dataclass
class TrackTableSoundcloud:
    _parsers = {
        "id": _INT64,
        "title": _TEXT,
        "duration": _INT32,
        "img": _OPT_TEXT,
        "author_id": _OPT_INT32,
    }

    id: int
    title: str
    duration: int
    img: Optional[str] = None
    author_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> TrackTableSoundcloud:
        return _parse(cls, data, cls._parsers)


@dataclass
class AuthorTableSoundcloud(_Entry):
    _parsers = {"id": _INT64, "title": _TEXT, "img": _OPT_TEXT}

    @classmethod
    def from_dict(cls, data: Any) -> AuthorTableSoundcloud:
        return _parse(cls, data, cls._parsers)

    def to_api_artist(self) -> ApiArtist:
        return ApiArtist(id=str(self.id), username=self.title, picture=self.img, is_dummy=False)


def _api_track(
    record: Union[TrackFromPlaylistResponse, FullTrackResponse], platform: ApiServices
) -> ApiTrack:
    platform = ApiServices(platform)
    return ApiTrack(
        id=str(record.id),
        service=platform,
        title=record.title,
        artists=[record.author.to_api_artist()],
        picture=record.img,
        duration=record.duration,
        platform=platform,
    )


@dataclass
class TrackFromPlaylistResponse:
    _parsers = {
        "id": _INT64,
        "title": _TEXT,
        "img": _OPT_TEXT,
        "duration": _INT64,
        "position": _UINT32,
        "author": _nested(AuthorTableSoundcloud),
    }

    id: int
    title: str
    img: Optional[str]
    duration: int
    position: int
    author: AuthorTableSoundcloud

    @classmethod
    def from_dict(cls, data: Any) -> TrackFromPlaylistResponse:
        return _parse(cls, data, cls._parsers)

    def to_api_track(self, platform: ApiServices) -> ApiTrack:
        return _api_track(self, platform)


@dataclass
class FullPlaylistResponse:
    _parsers = {
        "id": _INT64,
        "title": _TEXT,
        "img": _OPT_TEXT,
        "playlist_size": _UINT32,
        "author": _nested(AuthorTableSoundcloud),
        "tracks": _nested_list(TrackFromPlaylistResponse),
    }

    id: int
    title: str
    img: Optional[str]
    playlist_size: int
    author: AuthorTableSoundcloud
    tracks: list[TrackFromPlaylistResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> FullPlaylistResponse:
        return _parse(cls, data, cls._parsers)

    def to_api_playlist(self, platform: ApiServices) -> ApiPlaylist:
        """Build the API playlist; its size counts the tracks actually present."""
        platform = ApiServices(platform)
        return ApiPlaylist(
            id=str(self.id),
            title=self.title,
            parent_user_id=str(self.author.id),
            parent_username=self.author.title,
            parent_picture=self.author.img,
            picture=self.img,
            size=len(self.tracks),
            tracks=[track.to_api_track(platform) for track in self.tracks],
            platform=platform,
        )


@dataclass
class FullTrackResponse:
    _parsers = {
        "id": _INT64,
        "title": _TEXT,
        "img": _OPT_TEXT,
        "author": _nested(AuthorTableSoundcloud),
        "duration": _INT64,
    }

    id: int
    title: str
    img: Optional[str]
    author: AuthorTableSoundcloud
    duration: int

    @classmethod
    def from_dict(cls, data: Any) -> FullTrackResponse:
        return _parse(cls, data, cls._parsers)

    def to_api_track(self, platform: ApiServices) -> ApiTrack:
        return _api_track(self, platform)


@dataclass
class FullTracksResponse(Generic[T]):
    """Tracks that were found, plus the ids that were not."""

    found: list[T] = field(default_factory=list)
    not_found: list[int] = field(default_factory=list)