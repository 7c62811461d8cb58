"""Error Hierarchy — status codes, envelopes and log fields."""

import dataclasses

from app.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ExpenseNotFoundError,
    InvalidCredentialError,
    MissingCredentialError,
)


def test_missing_credential_is_401_with_challenge_header():
    err = MissingCredentialError()
    assert err.http_status == 401
    assert err.headers == {"WWW-Authenticate": "Bearer"}
    assert err.to_response() == {"error": "Access denied. No token provided."}
    assert err.category == ErrorCategory.AUTHENTICATION


def test_invalid_credential_is_403_and_keeps_reason_private():
    err = InvalidCredentialError("InvalidSignatureError: Signature verification failed")
    assert err.http_status == 403
    assert err.headers is None
    assert "Signature" not in err.to_response()["error"]


def test_not_found_is_404_with_ambiguous_message():
    err = ExpenseNotFoundError(12, ErrorContext(user_id=3))
    assert err.http_status == 404
    assert err.to_response() == {"error": "Expense not found or unauthorized"}
    assert err.log_extra()["expense_id"] == 12
    assert err.log_extra()["user_id"] == 3


def test_database_error_is_generic_500():
    err = DatabaseError("update")
    assert err.http_status == 500
    assert err.to_response() == {"error": "Server error"}
    assert err.log_extra()["operation"] == "update"
    assert err.log_extra()["error_code"] == "DATABASE_ERROR"


def test_error_context_carries_only_logged_fields():
    names = {f.name for f in dataclasses.fields(ErrorContext)}
    assert names == {"user_id", "expense_id"}
