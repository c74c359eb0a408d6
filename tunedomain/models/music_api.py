"""Response models shared by the music service endpoints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Optional

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)
_U32 = (0, 2**32 - 1)

_Parser = Callable[[Mapping[str, Any], str], Any]


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _required(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _check_int(value: Any, key: str, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"field {key!r}: {value} is out of range")
    return value


def _integer(bounds: tuple[int, int], *, optional: bool = False) -> _Parser:
    def parse(data: Mapping[str, Any], key: str) -> Optional[int]:
        value = data.get(key) if optional else _required(data, key)
        if optional and value is None:
            return None
        return _check_int(value, key, bounds)

    return parse


def _string(*, optional: bool = False) -> _Parser:
    def parse(data: Mapping[str, Any], key: str) -> Optional[str]:
        value = data.get(key) if optional else _required(data, key)
        if optional and value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"field {key!r}: expected a string")
        return value

    return parse


def _nested(record_type: Any) -> _Parser:
    return lambda data, key: record_type.from_dict(_required(data, key))


def _nested_list(record_type: Any) -> _Parser:
    def parse(data: Mapping[str, Any], key: str) -> list[Any]:
        value = _required(data, key)
        if not isinstance(value, list):
            raise ValueError(f"field {key!r}: expected a list")
        return [record_type.from_dict(item) for item in value]

    return parse


_INT32 = _integer(_I32)
_INT64 = _integer(_I64)
_UINT32 = _integer(_U32)
_OPT_INT32 = _integer(_I32, optional=True)
_TEXT = _string()
_OPT_TEXT = _string(optional=True)


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def _record_dict(record: Any) -> dict[str, Any]:
    """JSON-ready dict of a dataclass, fields in declaration order."""
    return {item.name: _serialize(getattr(record, item.name)) for item in fields(record)}


def _parse(cls: Any, data: Any, parsers: Mapping[str, _Parser]) -> Any:
    """Build ``cls`` from a mapping, validating each field with its parser."""
    data = _mapping(data, cls.__name__)
    return cls(**{name: parse(data, name) for name, parse in parsers.items()})


class ApiServices(str, Enum):
    """Music services the API aggregates."""

    DEEZER = "deezer"
    SOUNDCLOUD = "soundcloud"


@dataclass
class _Entry:
    id: int
    title: str
    img: Optional[str] = None


@dataclass
class ApiArtist:
    id: str
    username: str
    picture: Optional[str] = None
    is_dummy: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass
class ApiTrackInAlbum:
    id: str
    title: str
    duration: int
    track_url: Optional[str] = None
    track_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(kw_only=True)
class ApiAlbum:
    id: str
    img: Optional[str] = None
    title: str
    service: ApiServices
    artists: list[ApiArtist] = field(default_factory=list)
    tracks: list[ApiTrackInAlbum] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.service = ApiServices(self.service)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(kw_only=True)
class ApiTrack:
    id: str
    service: ApiServices
    title: str
    artists: list[ApiArtist] = field(default_factory=list)
    alb_id: Optional[str] = None
    alb_title: Optional[str] = None
    duration: int
    platform: ApiServices
    picture: Optional[str] = None
    track_url: Optional[str] = None
    track_token: Optional[str] = None

    def __post_init__(self) -> None:
        self.service = ApiServices(self.service)
        self.platform = ApiServices(self.platform)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(kw_only=True)
class ApiPlaylist:
    id: str
    title: str
    parent_user_id: str
    parent_username: str
    parent_picture: Optional[str] = None
    platform: ApiServices
    picture: Optional[str] = None
    tracks: list[ApiTrack] = field(default_factory=list)
    size: int

    def __post_init__(self) -> None:
        self.platform = ApiServices(self.platform)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass
class ApiUser:
    id: str
    img: str
    username: str

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


@dataclass(kw_only=True)
class ApiSearchPage:
    artists: list[ApiArtist] = field(default_factory=list)
    albums: list[ApiAlbum] = field(default_factory=list)
    tracks: list[ApiTrack] = field(default_factory=list)
    playlists: list[ApiPlaylist] = field(default_factory=list)
    users: list[ApiUser] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)