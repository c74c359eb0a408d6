"""HTTP error responses and the base class for errors that render one."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

PLAIN_TEXT = "text/plain; charset=utf-8"


def json_error(message: str) -> str:
    """Wrap a message as a JSON error body, ``{"error":"<message>"}``.

    The message is inserted as is, so it must not need escaping.
    """
    return f'{{"error":"{message}"}}'


@dataclass
class ErrorResponse:
    """Status code and body sent back to the client for a failed request."""

    status: HTTPStatus
    body: str
    content_type: str = PLAIN_TEXT

    def __post_init__(self) -> None:
        self.status = HTTPStatus(self.status)


class ResponseError(Exception):
    """An error that knows which HTTP response describes it.

    Subclasses either set ``status`` and ``public_message`` or override
    :meth:`to_response` to choose per case.
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    public_message: str = "INTERNAL_SERVER_ERROR"

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(self.status, json_error(self.public_message))