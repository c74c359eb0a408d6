import json
from http import HTTPStatus

import pytest

from tunedomain.errors.music_services import (
    BodyStreamError,
    BodyStreamErrorKind,
    DeezerApiError,
    DeezerApiErrorKind,
    SoundcloudApiError,
    SoundcloudApiErrorKind,
)
from tunedomain.errors.response import ResponseError


@pytest.mark.parametrize(
    "kind, status, message",
    [
        (DeezerApiErrorKind.REQUEST, HTTPStatus.INTERNAL_SERVER_ERROR, "request failed"),
        (DeezerApiErrorKind.URL_PARSE, HTTPStatus.BAD_REQUEST, "URL parsing failed"),
        (DeezerApiErrorKind.JSON_PARSE, HTTPStatus.INTERNAL_SERVER_ERROR, "JSON parsing failed"),
        (DeezerApiErrorKind.API, HTTPStatus.INTERNAL_SERVER_ERROR, "API returned an error"),
        (DeezerApiErrorKind.TOKEN_REQUIRED, HTTPStatus.INTERNAL_SERVER_ERROR, "token required"),
        (DeezerApiErrorKind.NO_CONTENT_LENGTH, HTTPStatus.INTERNAL_SERVER_ERROR, "no content length"),
        (DeezerApiErrorKind.PARSE_ID, HTTPStatus.INTERNAL_SERVER_ERROR, "deezer parse id error"),
        (DeezerApiErrorKind.PARSE_DURATION, HTTPStatus.INTERNAL_SERVER_ERROR, "parse duration error"),
        (DeezerApiErrorKind.NO_TRACKS, HTTPStatus.BAD_REQUEST, "no tracks found"),
        (DeezerApiErrorKind.AUTHOR_NOT_FOUND, HTTPStatus.INTERNAL_SERVER_ERROR, "author not found"),
    ],
)
def test_deezer_responses(kind, status, message):
    response = DeezerApiError(kind, "x").to_response()
    assert response.status == status
    assert json.loads(response.body) == {"error": message}


def test_deezer_request_message_includes_cause():
    cause = ConnectionError("timed out")
    error = DeezerApiError(DeezerApiErrorKind.REQUEST, cause)
    assert str(error) == "Request failed: timed out"
    assert error.__cause__ is cause


def test_deezer_api_error_shows_json_value():
    error = DeezerApiError(DeezerApiErrorKind.API, {"code": 4})
    assert str(error) == 'API returned an error: {"code":4}'


def test_deezer_fixed_messages_ignore_detail():
    error = DeezerApiError(DeezerApiErrorKind.PARSE_ID, "abc")
    assert str(error) == "Fail to parse id (expected digits)"
    assert error.detail == "abc"


def test_deezer_no_tracks_message_and_response():
    error = DeezerApiError(DeezerApiErrorKind.NO_TRACKS)
    assert isinstance(error, ResponseError)
    assert str(error) == "No tracks found"
    response = error.to_response()
    assert response.status == HTTPStatus.BAD_REQUEST
    assert json.loads(response.body) == {"error": "no tracks found"}


def test_deezer_rejects_unknown_kind():
    with pytest.raises(ValueError):
        DeezerApiError("nonsense")


def test_body_stream_lagged_message():
    error = BodyStreamError(BodyStreamErrorKind.LAGGED, 3)
    assert error.lost == 3
    assert "lost 3 messages" in str(error)
    assert str(error).endswith("The stream is now corrupt.")


@pytest.mark.parametrize(
    "kind, message",
    [
        (BodyStreamErrorKind.SOURCE, "An error occurred while producing the stream data"),
        (BodyStreamErrorKind.CHUNK, "Fail to get next chunk from soundcloud"),
    ],
)
def test_body_stream_plain_messages(kind, message):
    assert str(BodyStreamError(kind)) == message


@pytest.mark.parametrize("lost", [None, -1, 2**64, True])
def test_body_stream_lagged_needs_valid_count(lost):
    with pytest.raises(ValueError):
        BodyStreamError(BodyStreamErrorKind.LAGGED, lost)


def test_body_stream_count_only_for_lagged():
    with pytest.raises(ValueError):
        BodyStreamError(BodyStreamErrorKind.CHUNK, 1)


@pytest.mark.parametrize(
    "kind, status, message",
    [
        (SoundcloudApiErrorKind.INVALID_REQUEST, HTTPStatus.INTERNAL_SERVER_ERROR, "Soundcloud server response with error"),
        (SoundcloudApiErrorKind.URL_PARSE, HTTPStatus.BAD_REQUEST, "Fail to parse URL with provided params"),
        (SoundcloudApiErrorKind.DESERIALIZE, HTTPStatus.INTERNAL_SERVER_ERROR, "Deserialize soundcloud response error"),
        (SoundcloudApiErrorKind.NO_TRACK_DATA, HTTPStatus.NOT_FOUND, "No track data in response"),
        (SoundcloudApiErrorKind.NO_MEDIA_DATA, HTTPStatus.NOT_FOUND, "No media data in response"),
        (SoundcloudApiErrorKind.TRACK_DATA_NOT_FULL, HTTPStatus.NOT_FOUND, "TrackData is not full"),
        (SoundcloudApiErrorKind.TX_SEND, HTTPStatus.INTERNAL_SERVER_ERROR, "Tx send error"),
    ],
)
def test_soundcloud_responses(kind, status, message):
    response = SoundcloudApiError(kind).to_response()
    assert response.status == status
    assert json.loads(response.body) == {"error": message}


def test_soundcloud_request_passes_upstream_status():
    error = SoundcloudApiError(
        SoundcloudApiErrorKind.INVALID_REQUEST, "denied", HTTPStatus.FORBIDDEN
    )
    response = error.to_response()
    assert response.status == HTTPStatus.FORBIDDEN
    assert json.loads(response.body) == {"error": "Soundcloud server response with error"}


def test_soundcloud_status_only_for_requests():
    with pytest.raises(ValueError):
        SoundcloudApiError(SoundcloudApiErrorKind.TX_SEND, None, HTTPStatus.BAD_GATEWAY)


def test_soundcloud_keeps_cause():
    cause = BodyStreamError(BodyStreamErrorKind.CHUNK)
    error = SoundcloudApiError(SoundcloudApiErrorKind.TX_SEND, cause)
    assert error.__cause__ is cause
    assert str(error) == "Tx send error"