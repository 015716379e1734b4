"""
Core functionality for the flatfield formatter.
"""

from .config import FormatterConfig
from .exceptions import (
    FieldError,
    ConfigurationError,
    LengthError,
    TruncationError,
    TypeMismatchError,
    NotCallableError,
    FieldIssue,
    ValidationResult,
)
from .field import Field
from .format_spec import FormatSpec
from .hooks import TransformHooks

__all__ = [
    'Field',
    'FormatterConfig',
    'FormatSpec',
    'TransformHooks',
    'FieldError',
    'ConfigurationError',
    'LengthError',
    'TruncationError',
    'TypeMismatchError',
    'NotCallableError',
    'FieldIssue',
    'ValidationResult',
]
