"""Stored Deezer catalogue records and album responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tunedomain.models.music_api import (
    _INT32,
    _INT64,
    _OPT_TEXT,
    _TEXT,
    ApiAlbum,
    ApiArtist,
    ApiServices,
    ApiTrackInAlbum,
    _Entry,
    _nested,
    _nested_list,
    _parse,
    _record_dict,
)


@dataclass
class AlbumInputDeezer(_Entry):
    """Album row handed to the store."""


@dataclass
class TrackInputDeezer:
    id: int
    title: str
    duration: int


@dataclass
class AuthorInputDeezer(_Entry):
    """Author row handed to the store."""


@dataclass
class TrackTableDeezer:
    id: int
    title: str
    duration: int
    img: Optional[str]
    album_id: int


@dataclass
class AlbumTableDeezer:
    id: int
    title: str
    img: Optional[str]
    author_id: int


@dataclass
class AuthorTableDeezer(_Entry):
    """Author row as stored."""


@dataclass
class AuthorInfo:
    _parsers = {"id": _INT64, "name": _TEXT, "img": _OPT_TEXT}

    id: int
    name: str
    img: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> AuthorInfo:
        return _parse(cls, data, cls._parsers)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)

    def to_api_artist(self) -> ApiArtist:
        return ApiArtist(id=str(self.id), username=self.name, picture=self.img, is_dummy=False)


@dataclass
class TrackInfo:
    _parsers = {"id": _INT64, "title": _TEXT, "duration": _INT32, "img": _OPT_TEXT}

    id: int
    title: str
    duration: int
    img: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> TrackInfo:
        return _parse(cls, data, cls._parsers)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)

    def to_api_track(self) -> ApiTrackInAlbum:
        return ApiTrackInAlbum(id=str(self.id), title=self.title, duration=self.duration)


@dataclass
class FullAlbumResponse:
    _parsers = {
        "id": _INT64,
        "title": _TEXT,
        "img": _OPT_TEXT,
        "author": _nested(AuthorInfo),
        "tracks": _nested_list(TrackInfo),
    }

    id: int
    title: str
    img: Optional[str]
    author: AuthorInfo
    tracks: list[TrackInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> FullAlbumResponse:
        return _parse(cls, data, cls._parsers)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)

    def to_api_album(self) -> ApiAlbum:
        return ApiAlbum(
            id=str(self.id),
            title=self.title,
            img=self.img,
            artists=[self.author.to_api_artist()],
            tracks=[track.to_api_track() for track in self.tracks],
            service=ApiServices.DEEZER,
        )