"""Authentication errors: missing cookies and rejected request fields."""

from __future__ import annotations

from enum import Enum, auto
from http import HTTPStatus

from tunedomain.errors.response import ErrorResponse, ResponseError, json_error


class CookieErrorKind(Enum):
    VERIFICATION_TOKEN_NOT_FOUND = auto()
    ACCESS_TOKEN_NOT_FOUND = auto()
    REFRESH_TOKEN_NOT_FOUND = auto()


_COOKIE_MESSAGES = {
    CookieErrorKind.VERIFICATION_TOKEN_NOT_FOUND: "Verification token not found",
    CookieErrorKind.ACCESS_TOKEN_NOT_FOUND: "Access token not found",
    CookieErrorKind.REFRESH_TOKEN_NOT_FOUND: "Refresh token not found",
}

_COOKIE_RESPONSES = {
    CookieErrorKind.VERIFICATION_TOKEN_NOT_FOUND: (
        HTTPStatus.NOT_FOUND,
        "Verification token not found, possible verification time ended",
    ),
    CookieErrorKind.ACCESS_TOKEN_NOT_FOUND: (
        HTTPStatus.UNAUTHORIZED,
        "Access token possibly expired",
    ),
    CookieErrorKind.REFRESH_TOKEN_NOT_FOUND: (
        HTTPStatus.UNAUTHORIZED,
        "Refresh token not found, try to re-login",
    ),
}


class CookieError(ResponseError):
    """A cookie the request needed was absent."""

    def __init__(self, kind: CookieErrorKind) -> None:
        self.kind = CookieErrorKind(kind)
        super().__init__(_COOKIE_MESSAGES[self.kind])

    def to_response(self) -> ErrorResponse:
        status, message = _COOKIE_RESPONSES[self.kind]
        return ErrorResponse(status, json_error(message))


class ProblematicFieldsError(ResponseError):
    """Request fields were rejected; the message is sent back verbatim."""

    def __init__(self, status: HTTPStatus, message: str) -> None:
        self.status = HTTPStatus(status)
        self.message = message
        super().__init__(f"ProblematicFieldsError: {message}")

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(self.status, self.message)