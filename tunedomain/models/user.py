"""User, session and verification records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any
from uuid import UUID

from tunedomain.models.music_api import _INT64, _TEXT, _mapping, _nested_list

_U8 = (0, 255)


class IsUserExistsRes(Enum):
    """Outcome of checking whether a username or e-mail is taken."""

    NOT_EXISTS = auto()
    USERNAME_EXISTS = auto()
    EMAIL_EXISTS = auto()
    EMAIL_AND_USERNAME_EXISTS = auto()


@dataclass
class UserTable:
    id: int
    username: str
    email: str
    password_hash: str


@dataclass
class SessionTable:
    id: UUID
    user_id: int
    expires_at: datetime


@dataclass
class UserPlaylist:
    id: int
    title: str
    owner_id: int


class TrackPlatform(str, Enum):
    """Platform a stored track comes from."""

    DEEZER = "deezer"
    SOUNDCLOUD = "soundcloud"


@dataclass
class TrackInUserPlaylist:
    id: int
    title: str
    track_id: int
    platform_id: TrackPlatform
    position: int


@dataclass
class PlaylistInUser:
    id: int
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title}

    @classmethod
    def from_dict(cls, data: Any) -> PlaylistInUser:
        data = _mapping(data, cls.__name__)
        return cls(id=_INT64(data, "id"), title=_TEXT(data, "title"))


@dataclass
class UserWithPlaylists:
    id: int
    email: str
    username: str
    playlists: list[PlaylistInUser] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "playlists": [playlist.to_dict() for playlist in self.playlists],
        }

    @classmethod
    def from_dict(cls, data: Any) -> UserWithPlaylists:
        data = _mapping(data, cls.__name__)
        return cls(
            id=_INT64(data, "id"),
            email=_TEXT(data, "email"),
            username=_TEXT(data, "username"),
            playlists=_nested_list(PlaylistInUser)(data, "playlists"),
        )


def _rfc3339(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    micros = moment.microsecond
    if micros == 0:
        spec = "seconds"
    elif micros % 1000 == 0:
        spec = "milliseconds"
    else:
        spec = "microseconds"
    return moment.isoformat(timespec=spec)


def _check_u8(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if not _U8[0] <= value <= _U8[1]:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass
class UserAwaitVerification:
    """A registration waiting for its e-mail code to be confirmed."""

    email: str
    username: str
    password_hash: str
    code: str
    created_at: datetime
    attempts: int = 0
    code_resends: int = 0

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None or self.created_at.utcoffset() is None:
            raise ValueError("created_at must be timezone-aware")
        _check_u8("attempts", self.attempts)
        _check_u8("code_resends", self.code_resends)

    def to_hash_pairs(self) -> list[tuple[str, str]]:
        """Field/value pairs for storing the record as a cache hash."""
        return [
            ("email", self.email),
            ("username", self.username),
            ("password_hash", self.password_hash),
            ("code", self.code),
            ("created_at", _rfc3339(self.created_at)),
            ("attempts", str(self.attempts)),
            ("code_resends", str(self.code_resends)),
        ]


@dataclass
class UserVerifyResult:
    username: str
    email: str
    password_hash: str