"""
flatfield - Fixed-Width Field Formatter

Renders a single typed value into a fixed-width string for a flat file
record, and validates the configuration that drives the rendering.
"""

from .core import (
    Field,
    FormatterConfig,
    FormatSpec,
    TransformHooks,
    FieldError,
    ConfigurationError,
    LengthError,
    TruncationError,
    TypeMismatchError,
    NotCallableError,
    FieldIssue,
    ValidationResult,
)
from .core.types import PAD_LEFT, PAD_RIGHT, PRECISION, DECIMAL, THOUSAND_SEPARATOR, PhysicalKind
from .schemas import FieldSpec

__version__ = "0.1.0"

__all__ = [
    'Field',
    'FieldSpec',
    'FormatterConfig',
    'FormatSpec',
    'TransformHooks',
    'PhysicalKind',
    'FieldError',
    'ConfigurationError',
    'LengthError',
    'TruncationError',
    'TypeMismatchError',
    'NotCallableError',
    'FieldIssue',
    'ValidationResult',
    'PAD_LEFT',
    'PAD_RIGHT',
    'PRECISION',
    'DECIMAL',
    'THOUSAND_SEPARATOR',
]
