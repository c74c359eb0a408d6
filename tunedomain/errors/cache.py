"""Errors raised while reading sessions and users from the cache."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from http import HTTPStatus
from typing import Any, Optional

from tunedomain.errors.response import ErrorResponse, ResponseError, json_error


class _KindError(ResponseError):
    """An error picked by an enum kind, answered from a fixed response table."""

    def __init__(self, kind: Enum, message: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(kind.value if message is None else message)

    def _respond(self, table: Mapping[Any, tuple[HTTPStatus, str]]) -> ErrorResponse:
        status, message = table[self.kind]
        return ErrorResponse(status, json_error(message))


class SessionErrorKind(Enum):
    SESSION_NOT_FOUND = "Session not found"
    SESSION_WAS_UPDATED = "Session was updated"


_SESSION_RESPONSES = {
    SessionErrorKind.SESSION_NOT_FOUND: (HTTPStatus.UNAUTHORIZED, "Session not found"),
    SessionErrorKind.SESSION_WAS_UPDATED: (HTTPStatus.CONFLICT, "Session not found"),
}


class SessionError(_KindError):
    def __init__(self, kind: SessionErrorKind) -> None:
        super().__init__(SessionErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_SESSION_RESPONSES)


class UserErrorKind(Enum):
    PARSE_ERROR = "Fale to parse entity from db"
    USER_NOT_FOUND = "User not found"


_USER_RESPONSES = {
    UserErrorKind.PARSE_ERROR: (HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR"),
    UserErrorKind.USER_NOT_FOUND: (HTTPStatus.NOT_FOUND, "User not found"),
}


class UserError(_KindError):
    def __init__(self, kind: UserErrorKind) -> None:
        super().__init__(UserErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_USER_RESPONSES)


class UserVerifyErrorKind(Enum):
    PARSE_ERROR = "Fale to parse entity from db"
    USER_NOT_FOUND = "User not found, "
    EXCEEDED_ATTEMPTS = "Exceeded amount of attempts"
    WRONG_CODE = "Wrong code"
    EXPIRED = "Expired"


_USER_VERIFY_RESPONSES = {
    UserVerifyErrorKind.PARSE_ERROR: (HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR"),
    UserVerifyErrorKind.USER_NOT_FOUND: (HTTPStatus.NOT_FOUND, "NOT_FOUND"),
    UserVerifyErrorKind.EXPIRED: (HTTPStatus.NOT_FOUND, "NOT_FOUND"),
    UserVerifyErrorKind.EXCEEDED_ATTEMPTS: (HTTPStatus.NOT_ACCEPTABLE, "Exceeded attempts"),
    UserVerifyErrorKind.WRONG_CODE: (HTTPStatus.FORBIDDEN, "Wrong code"),
}


class UserVerifyError(_KindError):
    """A pending registration could not be verified."""

    def __init__(self, kind: UserVerifyErrorKind) -> None:
        super().__init__(UserVerifyErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_USER_VERIFY_RESPONSES)