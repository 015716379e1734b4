"""
Field: renders one typed value as a fixed-width string for a flat file record.

A field owns its configuration (width, type, precision, padding) and a value.
Setters return the field so configuration can be chained::

    field = Field().set_type("integer").set_width(6).set_pad("left").set_value(42)
    field.get()  # "000042"

Recoverable problems (bad type tag, truncation risk, type mismatch, ...) are
recorded as :class:`FieldIssue` entries and logged; they never abort
configuration. Only oversize single-character options raise immediately.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, List, Optional, Tuple, Union

from pydantic import ValidationError

from .config import FormatterConfig
from .exceptions import (
    ConfigurationError,
    FieldError,
    FieldIssue,
    LengthError,
    NotCallableError,
    Severity,
    TruncationError,
    TypeMismatchError,
    ValidationResult,
)
from .format_spec import FormatSpec
from .hooks import Transform, TransformHooks
from .types import (
    DATA_TYPES,
    DEFAULT_TYPE,
    PAD_RIGHT,
    UNCHECKED_TYPES,
    PhysicalKind,
    is_empty,
    native_kind,
    normalize_pad,
    text_of,
)
from ..schemas.field_spec import FieldSpec

logger = logging.getLogger(__name__)


class Field:
    """One configurable value-to-fixed-width-string formatter."""

    def __init__(
        self,
        spec: Union[FieldSpec, Mapping, None] = None,
        config: Optional[FormatterConfig] = None,
    ) -> None:
        self.config = config or FormatterConfig()

        self._start: Optional[int] = None
        self._width: Optional[int] = None
        self._width_defaulted = False
        self._type: str = DEFAULT_TYPE
        self._precision: Any = None
        self._precision_defaulted = False
        self._pad: int = PAD_RIGHT
        self._char: Optional[str] = None
        self._decimal: Optional[str] = None
        self._thousand_separator: Optional[str] = None
        self._value: Any = None
        self._name: Optional[str] = None
        self._hooks = TransformHooks()
        self._result: Optional[str] = None

        self._setter_issues: List[FieldIssue] = []
        self._validation_issues: List[FieldIssue] = []

        if spec is None:
            return
        if isinstance(spec, Mapping):
            try:
                spec = FieldSpec.model_validate(dict(spec))
            except ValidationError as e:
                raise ConfigurationError(f"Invalid field arguments: {e}") from e
        elif not isinstance(spec, FieldSpec):
            raise ConfigurationError(
                f"Invalid field arguments: expected a mapping or FieldSpec, got {type(spec).__name__}"
            )
        self._apply_spec(spec)

    @classmethod
    def from_dict(cls, data: Mapping, config: Optional[FormatterConfig] = None) -> Field:
        return cls(data, config=config)

    def _apply_spec(self, spec: FieldSpec) -> None:
        provided = spec.model_fields_set
        for option, setter in self._SPEC_SETTERS:
            if option in provided:
                setter(self, getattr(spec, option))

    # -- setters ---------------------------------------------------------

    def set_start(self, start: Any) -> Field:
        """Set the starting column position."""
        converted = self._to_int_option("start", start)
        if converted is not _INVALID:
            self._start = converted
        return self

    def set_width(self, width: Any) -> Field:
        """Define the field maximum width. ``None`` restores the lazy default."""
        converted = self._to_int_option("width", width)
        if converted is not _INVALID:
            self._width = converted
            self._width_defaulted = False
        return self

    def set_value(self, value: Any) -> Field:
        self._value = value
        return self

    def set_name(self, name: Optional[str]) -> Field:
        """Set the field name used to match the file header."""
        self._name = None if name is None else str(name)
        return self

    def set_precision(self, points: Any) -> Field:
        """Set the number of digits after the decimal point.

        Integral numbers and digit strings are stored as ``int``; anything
        else is kept as given and reported by :meth:`validate`.
        """
        self._precision = _as_precision(points)
        self._precision_defaulted = False
        return self

    def set_char(self, char: Any) -> Field:
        """Set the pad character.

        Raises:
            LengthError: If *char* is longer than one character.
        """
        self._char = self._glyph(char, "padding")
        return self

    def set_pad(self, pad: Any) -> Field:
        """Set the pad side: ``left`` fills on the left, ``right`` on the right."""
        try:
            self._pad = normalize_pad(pad)
        except ValueError as e:
            self._record(self._setter_issues, ConfigurationError(str(e), self._name))
        return self

    def set_type(self, type_name: Any) -> Field:
        """Assign the field data type.

        An unrecognized tag falls back to ``string`` and is recorded as a
        :class:`ConfigurationError`. Decimal types get the default precision
        when none was set.
        """
        key = str(type_name).strip().lower() if type_name is not None else None
        if key in DATA_TYPES:
            self._type = key
        else:
            self._type = DEFAULT_TYPE
            self._record(
                self._setter_issues,
                ConfigurationError(f"Invalid field type: {type_name!r}, defaulting to {DEFAULT_TYPE}", self._name),
            )

        if self.kind is PhysicalKind.DECIMAL:
            if self._precision is None:
                self._precision = self.config.default_precision
                self._precision_defaulted = True
        elif self._precision_defaulted:
            self._clear_default_precision()
        return self

    def set_decimal(self, decimal: Any) -> Field:
        """Set the decimal glyph.

        Raises:
            LengthError: If *decimal* is longer than one character.
        """
        self._decimal = self._glyph(decimal, "decimal")
        return self

    def set_thousand_separator(self, separator: Any) -> Field:
        """Set the thousands grouping glyph.

        Raises:
            LengthError: If *separator* is longer than one character.
        """
        self._thousand_separator = self._glyph(separator, "separator")
        return self

    def set_callable(self, fn: Optional[Transform]) -> Field:
        """Set the transform applied to the value before formatting."""
        try:
            self._hooks.set_pre(fn, self._name)
        except NotCallableError as e:
            self._record(self._setter_issues, e)
        return self

    def post_callable(self, fn: Optional[Transform]) -> Field:
        """Append a transform applied to the rendered string."""
        try:
            self._hooks.add_post(fn, self._name)
        except NotCallableError as e:
            self._record(self._setter_issues, e)
        return self

    def _post_callables(self, fns: List[Transform]) -> Field:
        for fn in fns:
            self.post_callable(fn)
        return self

    # Applied in this order so an explicit precision wins over the type default.
    _SPEC_SETTERS = (
        ("name", set_name),
        ("start", set_start),
        ("width", set_width),
        ("type", set_type),
        ("precision", set_precision),
        ("pad", set_pad),
        ("char", set_char),
        ("decimal", set_decimal),
        ("thousand_separator", set_thousand_separator),
        ("value", set_value),
        ("callable", set_callable),
        ("post_callable", _post_callables),
    )

    # -- accessors -------------------------------------------------------

    def width(self) -> int:
        """Get the maximum field width.

        Defaults to the length of the unformatted value the first time it is
        asked for; that default is kept even if the value changes later.
        """
        if self._width is None:
            self._width = len(text_of(self._value))
            self._width_defaulted = True
        return self._width

    @property
    def value(self) -> Any:
        """The unformatted value."""
        return self._value

    @property
    def start(self) -> Optional[int]:
        return self._start

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def type(self) -> str:
        return self._type

    @property
    def kind(self) -> PhysicalKind:
        return DATA_TYPES[self._type]

    def real_type(self) -> str:
        """Name of the native type the field type is represented as."""
        return self.kind.value

    @property
    def precision(self) -> Any:
        return self._precision

    @property
    def pad(self) -> int:
        return self._pad

    @property
    def char(self) -> Optional[str]:
        return self._char

    @property
    def decimal(self) -> Optional[str]:
        return self._decimal

    @property
    def thousand_separator(self) -> Optional[str]:
        return self._thousand_separator

    @property
    def callable(self) -> Optional[Transform]:
        """The pre-transform, if any."""
        return self._hooks.pre

    @property
    def post_callables(self) -> Tuple[Transform, ...]:
        return tuple(self._hooks.post)

    @property
    def hooks(self) -> TransformHooks:
        return self._hooks

    @property
    def issues(self) -> List[FieldIssue]:
        """Issues recorded by setters and by the last :meth:`validate` run."""
        return self._setter_issues + self._validation_issues

    def result_width(self) -> Optional[int]:
        """Width of the last rendered string, ``None`` if nothing was rendered."""
        if not self._result:
            return None
        return len(self._result)

    # -- rendering -------------------------------------------------------

    def format_spec(self) -> FormatSpec:
        """Build the directive the value is rendered through.

        Precision falls back to the width when it is unset, zero or negative.
        """
        width = self.width()
        precision = self._precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision <= 0:
            precision = width

        return FormatSpec(
            fill=self._char or self.config.default_fill,
            left_justify=self._pad >= 0,
            width=width,
            precision=precision,
            kind=self.kind,
            strip_decimal=self._type == "sfloat",
            decimal=self._decimal,
            thousand_separator=self._thousand_separator,
            overflow=self.config.overflow,
            name=self._name,
        )

    def get(self) -> Optional[str]:
        """Render the value, or return ``None`` when there is nothing to output.

        Nothing is output for an empty value, a ``void`` field, or a field
        whose width is not positive. A number in a field without a configured
        width is rendered at full length. The pre-transform receives a shallow
        copy of the value.

        Raises:
            TypeMismatchError: If the value cannot be coerced to the field type.
            TruncationError: If a number does not fit and overflow is ``"raise"``.
        """
        if is_empty(self._value) or self._type == "void":
            if self.config.debug:
                logger.debug("No output for field %r (type %s, value %r)", self._name, self._type, self._value)
            return None

        width = self.width()
        if width <= 0:
            logger.warning("Field %r has no positive width (%d), nothing rendered", self._name, width)
            return None

        value = self._hooks.apply_pre(copy.copy(self._value))
        spec = self.format_spec()
        body = spec.body(value)
        if self._width_defaulted and spec.kind is not PhysicalKind.TEXT and len(body) > spec.width:
            # The default width comes from the unformatted value; a number
            # may need more columns once precision and glyphs are applied.
            spec = replace(spec, width=len(body))
        if self.config.debug:
            logger.debug("Rendering field %r value %r through %s", self._name, value, spec.directive)

        self._result = spec.pad(body)
        return self._result

    # -- validation ------------------------------------------------------

    def validate(self) -> Field:
        """Check the value against the configuration.

        Every check runs; each problem is recorded and logged rather than
        raised. An empty value turns the field into a ``blank`` field.
        Calling it again replaces the issues of the previous run.
        """
        issues: List[FieldIssue] = []
        self._validation_issues = issues
        value = self._value

        if is_empty(value):
            self._type = "blank"
            if self._precision_defaulted:
                self._clear_default_precision()
        else:
            if self._width is None:
                self._record(
                    issues,
                    ConfigurationError(f"Field width not defined, set to {self.width()}", self._name),
                    severity="warning",
                )
            width = self.width()
            if width <= 0:
                self._record(issues, ConfigurationError(f"Field width must be positive, got {width}", self._name))
            elif len(text_of(value)) > width:
                self._record(issues, TruncationError(f"Value truncated: maximum width {width}", self._name))

        kind = self.kind
        if self._type not in UNCHECKED_TYPES and native_kind(value) is not kind:
            self._record(
                issues,
                TypeMismatchError(
                    f"Type mismatch: {type(value).__name__} given, type {self._type} expects {kind.value}",
                    self._name,
                ),
            )

        if self._precision is not None:
            if kind is not PhysicalKind.DECIMAL:
                self._record(
                    issues,
                    ConfigurationError(f"Cannot set float precision on type {self._type}", self._name),
                )
            if isinstance(self._precision, bool) or not isinstance(self._precision, int):
                self._record(
                    issues,
                    ConfigurationError(f"Float precision must be an integer, got {self._precision!r}", self._name),
                )
            elif self._precision < 0:
                self._record(
                    issues,
                    ConfigurationError(f"Float precision must not be negative, got {self._precision}", self._name),
                )
        return self

    def check(self) -> ValidationResult:
        """Run :meth:`validate` and return every recorded issue alongside the field."""
        self.validate()
        return ValidationResult(field=self, issues=self.issues)

    # -- helpers ---------------------------------------------------------

    def _record(self, issues: List[FieldIssue], error: FieldError, severity: Severity = "error") -> None:
        issue = FieldIssue(error=error, severity=severity)
        issues.append(issue)
        logger.log(self.config.level, "%s: %s", issue.error_type, error)
        if self.config.debug:
            logger.debug("Recorded %s on %r", issue, self)

    def _clear_default_precision(self) -> None:
        self._precision = None
        self._precision_defaulted = False

    def _to_int_option(self, option: str, raw: Any) -> Any:
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            self._record(
                self._setter_issues,
                ConfigurationError(f"Field {option} must be an integer, got {raw!r}", self._name),
            )
            return _INVALID

    def _glyph(self, char: Any, label: str) -> Optional[str]:
        if char is None:
            return None
        char = str(char)
        if len(char) > 1:
            raise LengthError(
                f"Invalid character: {char!r} {label} character must be a char of width 1.",
                self._name,
            )
        return char or None

    # -- conveniences ----------------------------------------------------

    def __call__(self) -> Optional[str]:
        return self.get()

    def __str__(self) -> str:
        result = self.get()
        return "" if result is None else result

    def __repr__(self) -> str:
        return (
            f"Field(name={self._name!r}, type={self._type!r}, width={self._width!r}, "
            f"value={self._value!r})"
        )


_INVALID = object()


def _as_precision(points: Any) -> Any:
    if points is None or isinstance(points, bool):
        return points
    if isinstance(points, int):
        return points
    if isinstance(points, float) and points.is_integer():
        return int(points)
    if isinstance(points, str) and points.strip().lstrip("-").isdigit():
        return int(points.strip())
    return points
