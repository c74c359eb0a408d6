import json
from http import HTTPStatus

import pytest

from tunedomain.errors.auth import CookieError, CookieErrorKind, ProblematicFieldsError
from tunedomain.errors.response import ResponseError


@pytest.mark.parametrize(
    "kind, status, message",
    [
        (
            CookieErrorKind.VERIFICATION_TOKEN_NOT_FOUND,
            HTTPStatus.NOT_FOUND,
            "Verification token not found, possible verification time ended",
        ),
        (
            CookieErrorKind.ACCESS_TOKEN_NOT_FOUND,
            HTTPStatus.UNAUTHORIZED,
            "Access token possibly expired",
        ),
        (
            CookieErrorKind.REFRESH_TOKEN_NOT_FOUND,
            HTTPStatus.UNAUTHORIZED,
            "Refresh token not found, try to re-login",
        ),
    ],
)
def test_cookie_error_responses(kind, status, message):
    response = CookieError(kind).to_response()
    assert response.status is status
    assert json.loads(response.body) == {"error": message}


def test_cookie_error_rejects_unknown_kind():
    with pytest.raises(ValueError):
        CookieError("no such cookie")


def test_cookie_error_caught_as_response_error():
    error = CookieError(CookieErrorKind.REFRESH_TOKEN_NOT_FOUND)
    with pytest.raises(ResponseError) as caught:
        raise error
    assert caught.value.kind is CookieErrorKind.REFRESH_TOKEN_NOT_FOUND
    response = error.to_response()
    assert response.status is HTTPStatus.UNAUTHORIZED
    assert json.loads(response.body) == {"error": "Refresh token not found, try to re-login"}


def test_problematic_fields_body_is_raw_message():
    error = ProblematicFieldsError(HTTPStatus.BAD_REQUEST, "email is invalid")
    response = error.to_response()
    assert response.status is HTTPStatus.BAD_REQUEST
    assert response.body == "email is invalid"


def test_problematic_fields_display():
    error = ProblematicFieldsError(HTTPStatus.UNPROCESSABLE_ENTITY, "username too short")
    assert str(error) == "ProblematicFieldsError: username too short"
    assert error.message == "username too short"


def test_problematic_fields_int_status():
    assert ProblematicFieldsError(409, "taken").to_response().status is HTTPStatus.CONFLICT


def test_problematic_fields_invalid_status():
    with pytest.raises(ValueError):
        ProblematicFieldsError(1000, "bad")