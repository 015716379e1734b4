"""Tests for the exception taxonomy and the issue containers."""

from __future__ import annotations

import pytest

from flatfield import Field
from flatfield.core.exceptions import (
    ConfigurationError,
    FieldError,
    FieldIssue,
    LengthError,
    NotCallableError,
    TruncationError,
    TypeMismatchError,
    ValidationResult,
)


class TestFieldError:
    def test_message_only(self):
        err = FieldError("bad width")
        assert str(err) == "bad width"
        assert err.message == "bad width"
        assert err.name is None

    def test_message_with_name(self):
        err = FieldError("bad width", name="amount")
        assert str(err) == "bad width | Field: amount"

    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, LengthError, TruncationError, TypeMismatchError, NotCallableError],
    )
    def test_subclasses(self, cls):
        assert issubclass(cls, FieldError)


class TestFieldIssue:
    def test_error_type_derived(self):
        issue = FieldIssue(error=TruncationError("too long"))
        assert issue.error_type == "TruncationError"
        assert issue.severity == "error"

    def test_str(self):
        issue = FieldIssue(error=ConfigurationError("no width"), severity="warning")
        assert str(issue) == "FieldIssue(warning, ConfigurationError: no width)"


class TestValidationResult:
    def test_empty(self):
        result = ValidationResult(field=Field())
        assert result.is_valid
        assert not result.has_errors
        assert result.get_error_summary() == {}

    def test_mixed(self):
        issues = [
            FieldIssue(error=ConfigurationError("a"), severity="warning"),
            FieldIssue(error=TruncationError("b")),
            FieldIssue(error=TruncationError("c")),
        ]
        result = ValidationResult(field=Field(), issues=issues)
        assert not result.is_valid
        assert result.has_errors
        assert len(result.warnings) == 1
        assert len(result.errors) == 2
        assert result.get_error_summary() == {"ConfigurationError": 1, "TruncationError": 2}
        assert str(result) == "ValidationResult(2 errors, 1 warnings)"

    def test_warnings_only_has_no_errors(self):
        result = Field({"value": "abc"}).check()
        assert not result.is_valid
        assert not result.has_errors
