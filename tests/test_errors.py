"""Tests for workflow error payloads."""

import pytest

from article_desk.errors import (
    Forbidden,
    IncompleteDecision,
    InvalidOperation,
    InvalidState,
    NotFound,
    WorkflowError,
)


@pytest.mark.parametrize(
    ("error_cls", "code", "status_code"),
    [
        (Forbidden, "forbidden", 403),
        (NotFound, "not_found", 404),
        (InvalidState, "invalid_state", 409),
        (InvalidOperation, "invalid_operation", 400),
    ],
)
def test_error_codes(error_cls, code, status_code):
    error = error_cls("reason")
    assert isinstance(error, WorkflowError)
    assert error.status_code == status_code
    assert error.to_dict() == {"error": code, "detail": "reason"}


def test_incomplete_decision_lists_pending_ids():
    error = IncompleteDecision([2, 5])
    assert isinstance(error, InvalidState)
    assert error.status_code == 409
    assert error.to_dict() == {
        "error": "incomplete_decision",
        "detail": "2 change(s) still pending a decision",
        "pending": [2, 5],
    }
