"""Errors raised while talking to the Deezer and SoundCloud APIs."""

from __future__ import annotations

import json
from enum import Enum
from http import HTTPStatus
from typing import Any, Optional, Union

from tunedomain.errors.response import ErrorResponse, ResponseError, json_error

_U64_MAX = 2**64 - 1


class DeezerApiErrorKind(Enum):
    REQUEST = "request"
    URL_PARSE = "url_parse"
    JSON_PARSE = "json_parse"
    API = "api"
    TOKEN_REQUIRED = "token_required"
    NO_CONTENT_LENGTH = "no_content_length"
    PARSE_ID = "parse_id"
    PARSE_DURATION = "parse_duration"
    NO_TRACKS = "no_tracks"
    AUTHOR_NOT_FOUND = "author_not_found"


# kind -> (message template, response status, public message)
_DEEZER = {
    DeezerApiErrorKind.REQUEST: (
        "Request failed: {}",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "request failed",
    ),
    DeezerApiErrorKind.URL_PARSE: (
        "Failed to parse URL: {}",
        HTTPStatus.BAD_REQUEST,
        "URL parsing failed",
    ),
    DeezerApiErrorKind.JSON_PARSE: (
        "Failed to parse json: {}",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "JSON parsing failed",
    ),
    DeezerApiErrorKind.API: (
        "API returned an error: {}",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "API returned an error",
    ),
    DeezerApiErrorKind.TOKEN_REQUIRED: (
        "A valid API token is required",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "token required",
    ),
    DeezerApiErrorKind.NO_CONTENT_LENGTH: (
        "No content length on stream",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "no content length",
    ),
    DeezerApiErrorKind.PARSE_ID: (
        "Fail to parse id (expected digits)",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "deezer parse id error",
    ),
    DeezerApiErrorKind.PARSE_DURATION: (
        "Fail to parse duration expected i32 digit's",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "parse duration error",
    ),
    DeezerApiErrorKind.NO_TRACKS: (
        "No tracks found",
        HTTPStatus.BAD_REQUEST,
        "no tracks found",
    ),
    DeezerApiErrorKind.AUTHOR_NOT_FOUND: (
        "Fail to find author by art_id in authors",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "author not found",
    ),
}


class DeezerApiError(ResponseError):
    """A Deezer request failed or returned something unusable.

    ``detail`` carries the underlying error, the API's JSON error value,
    or the text that failed to parse, depending on the kind.
    """

    def __init__(self, kind: DeezerApiErrorKind, detail: Any = None) -> None:
        self.kind = DeezerApiErrorKind(kind)
        self.detail = detail
        template = _DEEZER[self.kind][0]
        if self.kind is DeezerApiErrorKind.API:
            shown = json.dumps(detail, separators=(",", ":"))
        else:
            shown = str(detail)
        super().__init__(template.format(shown))
        if isinstance(detail, BaseException):
            self.__cause__ = detail

    def to_response(self) -> ErrorResponse:
        _, status, message = _DEEZER[self.kind]
        return ErrorResponse(status, json_error(message))


class BodyStreamErrorKind(Enum):
    SOURCE = "source"
    LAGGED = "lagged"
    CHUNK = "chunk"


class BodyStreamError(Exception):
    """Producing or relaying a streamed response body failed."""

    def __init__(self, kind: BodyStreamErrorKind, lost: Optional[int] = None) -> None:
        self.kind = BodyStreamErrorKind(kind)
        if self.kind is BodyStreamErrorKind.LAGGED:
            if isinstance(lost, bool) or not isinstance(lost, int):
                raise ValueError("a lagged stream error needs the number of lost messages")
            if not 0 <= lost <= _U64_MAX:
                raise ValueError(f"lost message count out of range: {lost}")
            message = (
                f"The broadcast stream receiver lagged and lost {lost} messages. "
                "The stream is now corrupt."
            )
        elif lost is not None:
            raise ValueError("only a lagged stream error carries a lost message count")
        elif self.kind is BodyStreamErrorKind.SOURCE:
            message = "An error occurred while producing the stream data"
        else:
            message = "Fail to get next chunk from soundcloud"
        self.lost = lost
        super().__init__(message)


class SoundcloudApiErrorKind(Enum):
    INVALID_REQUEST = "invalid_request"
    URL_PARSE = "url_parse"
    DESERIALIZE = "deserialize"
    NO_TRACK_DATA = "no_track_data"
    NO_MEDIA_DATA = "no_media_data"
    TRACK_DATA_NOT_FULL = "track_data_not_full"
    TX_SEND = "tx_send"


_SOUNDCLOUD = {
    SoundcloudApiErrorKind.INVALID_REQUEST: (
        "Invalid request to SoundCloud",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Soundcloud server response with error",
    ),
    SoundcloudApiErrorKind.URL_PARSE: (
        "Error while creating URL for SoundCloud request, invalid data was provided",
        HTTPStatus.BAD_REQUEST,
        "Fail to parse URL with provided params",
    ),
    SoundcloudApiErrorKind.DESERIALIZE: (
        "Error while deserialize",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Deserialize soundcloud response error",
    ),
    SoundcloudApiErrorKind.NO_TRACK_DATA: (
        "No data for track in response",
        HTTPStatus.NOT_FOUND,
        "No track data in response",
    ),
    SoundcloudApiErrorKind.NO_MEDIA_DATA: (
        "No media data attached in track in response",
        HTTPStatus.NOT_FOUND,
        "No media data in response",
    ),
    SoundcloudApiErrorKind.TRACK_DATA_NOT_FULL: (
        "Track data is not full",
        HTTPStatus.NOT_FOUND,
        "TrackData is not full",
    ),
    SoundcloudApiErrorKind.TX_SEND: (
        "Tx send error",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Tx send error",
    ),
}


class SoundcloudApiError(ResponseError):
    """A SoundCloud request failed or its response was incomplete.

    For a failed request, ``status`` is the status the SoundCloud server
    answered with, if any; the response passes it on.
    """

    def __init__(
        self,
        kind: SoundcloudApiErrorKind,
        cause: Union[BaseException, str, None] = None,
        status: Optional[HTTPStatus] = None,
    ) -> None:
        self.kind = SoundcloudApiErrorKind(kind)
        if status is not None and self.kind is not SoundcloudApiErrorKind.INVALID_REQUEST:
            raise ValueError("only a failed request carries an upstream status")
        self.cause = cause
        self.upstream_status = None if status is None else HTTPStatus(status)
        super().__init__(_SOUNDCLOUD[self.kind][0])
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def to_response(self) -> ErrorResponse:
        _, status, message = _SOUNDCLOUD[self.kind]
        if self.upstream_status is not None:
            status = self.upstream_status
        return ErrorResponse(status, json_error(message))