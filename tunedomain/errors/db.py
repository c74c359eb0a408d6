"""Errors raised by the database layer."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Optional

from tunedomain.errors.cache import _KindError
from tunedomain.errors.response import ErrorResponse


class SessionCreationErrorKind(Enum):
    ID_ALREADY_EXISTS = "Id already exists"
    USER_NOT_FOUND = "User not found"


_SESSION_CREATION_RESPONSES = {
    SessionCreationErrorKind.ID_ALREADY_EXISTS: (
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Session ID already exists",
    ),
    SessionCreationErrorKind.USER_NOT_FOUND: (HTTPStatus.NOT_FOUND, "User not found"),
}


class SessionCreationError(_KindError):
    def __init__(self, kind: SessionCreationErrorKind) -> None:
        super().__init__(SessionCreationErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_SESSION_CREATION_RESPONSES)


class SessionUpdateErrorKind(Enum):
    NOT_FOUND = "Session not found"
    INVALID_SERIAL_NUMBER = "Old token"
    EXPIRED = "Session expired"


_SESSION_UPDATE_RESPONSES = {
    SessionUpdateErrorKind.NOT_FOUND: (HTTPStatus.BAD_REQUEST, "Session not found"),
    SessionUpdateErrorKind.INVALID_SERIAL_NUMBER: (HTTPStatus.NOT_FOUND, "User not found"),
    SessionUpdateErrorKind.EXPIRED: (HTTPStatus.CONFLICT, "Session expired"),
}


class SessionUpdateError(_KindError):
    def __init__(self, kind: SessionUpdateErrorKind) -> None:
        super().__init__(SessionUpdateErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_SESSION_UPDATE_RESPONSES)


class UserCreationErrorKind(Enum):
    EMAIL_ALREADY_EXISTS = "Account with this email already exists"
    OTHER = "Unexpected"


_USER_CREATION_RESPONSES = {
    UserCreationErrorKind.EMAIL_ALREADY_EXISTS: (
        HTTPStatus.CONFLICT,
        "Email or username already exists",
    ),
    UserCreationErrorKind.OTHER: (HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR"),
}


class UserCreationError(_KindError):
    def __init__(self, kind: UserCreationErrorKind) -> None:
        super().__init__(UserCreationErrorKind(kind))

    def to_response(self) -> ErrorResponse:
        return self._respond(_USER_CREATION_RESPONSES)


class DatabaseErrorKind(Enum):
    ROW_NOT_FOUND = "row not found"
    UNIQUE_VIOLATION = "unique violation"
    OTHER = "other"


_DATABASE_RESPONSES = {
    DatabaseErrorKind.ROW_NOT_FOUND: (
        HTTPStatus.NOT_FOUND,
        "The requested resource was not found.",
    ),
    DatabaseErrorKind.UNIQUE_VIOLATION: (
        HTTPStatus.CONFLICT,
        "A record with this value already exists.",
    ),
    DatabaseErrorKind.OTHER: (
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "An internal database error occurred.",
    ),
}


class DatabaseError(_KindError):
    """A failure reported by the database driver."""

    def __init__(self, kind: DatabaseErrorKind, detail: Optional[str] = None) -> None:
        kind = DatabaseErrorKind(kind)
        self.detail = detail if detail else kind.value
        super().__init__(kind, f"Database error: {self.detail}")

    def to_response(self) -> ErrorResponse:
        return self._respond(_DATABASE_RESPONSES)