"""
Custom exceptions for the flatfield formatter.

Provides specific exception types for the ways a field can be misconfigured
or fail to render, plus the containers used to carry recoverable issues back
to the caller instead of raising them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Literal, Optional

if TYPE_CHECKING:
    from .field import Field


class FieldError(Exception):
    """Base exception for all field formatting errors.

    Attributes:
        message: Human-readable error description.
        name: Name of the field involved (``None`` if the field is unnamed).
    """

    def __init__(self, message: str, name: Optional[str] = None):
        self.message = message
        self.name = name

        error_parts = [message]
        if name is not None:
            error_parts.append(f"Field: {name}")

        super().__init__(" | ".join(error_parts))


class ConfigurationError(FieldError):
    """Raised or recorded when a field option is invalid.

    Common causes:
        - Unrecognized type tag (the field falls back to ``string``).
        - Precision set on a type that is not a decimal number.
        - Non-integer precision.
        - A mapping that is not a mapping passed to the constructor.
    """
    pass


class LengthError(FieldError):
    """Raised when a single-character option (pad, decimal, separator) is longer than one character."""
    pass


class TruncationError(FieldError):
    """Recorded when a value is wider than the field width; raised when a number cannot fit."""
    pass


class TypeMismatchError(FieldError):
    """Recorded when a value's native kind disagrees with the field type; raised when it cannot be coerced."""
    pass


class NotCallableError(FieldError):
    """Recorded when a transform argument is not callable."""
    pass


Severity = Literal["warning", "error"]


@dataclass
class FieldIssue:
    """A recoverable problem found while configuring or validating a field."""

    error: FieldError
    severity: Severity = "error"
    error_type: str = ""

    def __post_init__(self) -> None:
        if not self.error_type:
            self.error_type = type(self.error).__name__

    def __str__(self) -> str:
        return f"FieldIssue({self.severity}, {self.error_type}: {self.error})"


@dataclass
class ValidationResult:
    """
    Outcome of validating a field.

    The field stays usable whatever the issues are; callers decide
    whether a field with errors should still be rendered.
    """

    field: "Field"
    issues: List[FieldIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[FieldIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> List[FieldIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def has_errors(self) -> bool:
        """True if any issue is an error rather than a warning."""
        return len(self.errors) > 0

    @property
    def is_valid(self) -> bool:
        """True if no issue of any severity was recorded."""
        return len(self.issues) == 0

    def get_error_summary(self) -> Dict[str, int]:
        """Get counts of issues per error type."""
        error_counts: Dict[str, int] = {}
        for issue in self.issues:
            error_counts[issue.error_type] = error_counts.get(issue.error_type, 0) + 1
        return error_counts

    def __str__(self) -> str:
        return (
            f"ValidationResult({len(self.errors)} errors, "
            f"{len(self.warnings)} warnings)"
        )
