"""Error hierarchy tests — codes, statuses and the REST envelope."""

from app.core.errors import (
    CalendarApiError, DatabaseError, EmptyInputError, ErrorCategory, ErrorContext,
    GoogleCalendarError, GoogleNotConfiguredError, GoogleNotConnectedError,
    MissingFieldsError, UnauthorizedError,
)

ERROR_TABLE = [
    (EmptyInputError(), "EMPTY_INPUT", 400),
    (MissingFieldsError(["title"]), "VALIDATION_ERROR", 400),
    (UnauthorizedError(), "UNAUTHORIZED", 401),
    (GoogleNotConfiguredError(), "GOOGLE_NOT_CONFIGURED", 400),
    (GoogleNotConnectedError(), "GOOGLE_NOT_CONNECTED", 400),
    (GoogleCalendarError("x", "insert"), "GOOGLE_API_ERROR", 502),
    (DatabaseError("x", "query"), "DATABASE_ERROR", 503),
]


def test_empty_input_is_a_400_validation_error():
    err = EmptyInputError()
    assert isinstance(err, CalendarApiError)
    assert err.http_status == 400
    assert err.category.value == "validation"


def test_missing_fields_message_lists_fields():
    err = MissingFieldsError(["title", "start", "end"])
    assert err.message == "title/start/end required"
    assert err.fields == ["title", "start", "end"]


def test_to_response_envelope():
    err = UnauthorizedError(ErrorContext(path="/api/events"))
    body = err.to_response()
    assert body["ok"] is False
    assert body["error"]["code"] == "UNAUTHORIZED"
    assert body["error"]["context"]["path"] == "/api/events"
    assert "timestamp" in body["error"]


def test_user_message_overrides_internal_message():
    err = GoogleCalendarError("boom", "insert", ErrorContext(user_message="try again"))
    assert err.message == "Google Calendar insert failed: boom"
    assert err.to_response()["error"]["message"] == "try again"


def test_google_errors_status_codes():
    assert GoogleNotConfiguredError().http_status == 400
    assert GoogleNotConnectedError().http_status == 400
    assert GoogleCalendarError("x", "list").http_status == 502


def test_every_error_class_has_a_documented_code_and_status():
    documented = {type(err) for err, _, _ in ERROR_TABLE}
    assert set(CalendarApiError.__subclasses__()) == documented
    for err, code, status in ERROR_TABLE:
        assert (err.code, err.http_status) == (code, status)


def test_no_not_found_category():
    assert "resource_not_found" not in {c.value for c in ErrorCategory}
