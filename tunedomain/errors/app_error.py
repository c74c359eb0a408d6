"""Turning any application error into the HTTP response it stands for."""

from __future__ import annotations

from http import HTTPStatus
from typing import Union

from tunedomain.errors.response import ErrorResponse, ResponseError, json_error

_INTERNAL = "INTERNAL_SERVER_ERROR"


class CacheBackendError(ResponseError):
    """The cache server could not be reached or rejected a command."""

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(HTTPStatus.INTERNAL_SERVER_ERROR, json_error(_INTERNAL))


class PasswordHashFailure(ResponseError):
    """Hashing or checking a password failed."""

    def __init__(self, cause: Union[BaseException, str]) -> None:
        self.cause = cause
        super().__init__(f"Fail to decrypt/encrypt password: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(HTTPStatus.INTERNAL_SERVER_ERROR, json_error(_INTERNAL))


def error_response(error: BaseException) -> ErrorResponse:
    """Return the response for an application error.

    Raises TypeError for exceptions that do not describe a response.
    """
    if not isinstance(error, ResponseError):
        raise TypeError(f"{type(error).__name__} has no HTTP response")
    return error.to_response()