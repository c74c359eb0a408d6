import json
from http import HTTPStatus

import pytest

from tunedomain.errors.email import MailerError, MailerErrorKind


def test_address_parse_is_bad_request():
    response = MailerError(MailerErrorKind.ADDRESS_PARSE, "missing @").to_response()
    assert response.status is HTTPStatus.BAD_REQUEST
    assert json.loads(response.body) == {"error": "Bad email address"}


@pytest.mark.parametrize("kind", [MailerErrorKind.EMAIL_BUILD, MailerErrorKind.SMTP_TRANSPORT])
def test_other_failures_are_server_errors(kind):
    response = MailerError(kind, "boom").to_response()
    assert response.status is HTTPStatus.INTERNAL_SERVER_ERROR
    assert json.loads(response.body) == {"error": "Captain we fucked up"}


def test_display_includes_cause():
    error = MailerError(MailerErrorKind.ADDRESS_PARSE, ValueError("no domain"))
    assert str(error) == "Failed to parse email address: no domain"


def test_exception_cause_is_chained():
    original = ConnectionError("refused")
    error = MailerError(MailerErrorKind.SMTP_TRANSPORT, original)
    assert error.__cause__ is original
    assert error.cause is original


def test_string_cause_not_chained():
    error = MailerError(MailerErrorKind.EMAIL_BUILD, "no body")
    assert error.__cause__ is None
    assert str(error) == "Failed to build email: no body"


def test_kind_from_value():
    error = MailerError("Failed to send email via SMTP", "timeout")
    assert error.kind is MailerErrorKind.SMTP_TRANSPORT


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        MailerError("unknown", "x")