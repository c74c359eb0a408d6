"""Errors raised while building or sending e-mail."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Union

from tunedomain.errors.response import ErrorResponse, ResponseError, json_error


class MailerErrorKind(Enum):
    EMAIL_BUILD = "Failed to build email"
    ADDRESS_PARSE = "Failed to parse email address"
    SMTP_TRANSPORT = "Failed to send email via SMTP"


class MailerError(ResponseError):
    """Building, addressing or sending a message failed."""

    def __init__(self, kind: MailerErrorKind, cause: Union[BaseException, str]) -> None:
        self.kind = MailerErrorKind(kind)
        self.cause = cause
        super().__init__(f"{self.kind.value}: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def to_response(self) -> ErrorResponse:
        if self.kind is MailerErrorKind.ADDRESS_PARSE:
            return ErrorResponse(HTTPStatus.BAD_REQUEST, json_error("Bad email address"))
        return ErrorResponse(HTTPStatus.INTERNAL_SERVER_ERROR, json_error("Captain we fucked up"))