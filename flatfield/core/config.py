"""
Formatter configuration for flatfield.

Holds the options that used to live in process-wide state (the debug
switch) together with the rendering defaults, so each field carries
its own explicit configuration.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from .types import PRECISION

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class FormatterConfig:
    """
    Configuration shared by one or more fields.

    Pass the same instance to every field of a record to give the
    whole record consistent defaults.
    """

    # === Diagnostics ===
    debug: bool = False
    """Log every recorded issue and every render directive at DEBUG"""

    log_level: str = "WARNING"
    """Level at which recorded issues are logged (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""

    # === Rendering defaults ===
    default_precision: int = PRECISION
    """Digits after the decimal point for decimal types without a precision"""

    default_fill: str = "0"
    """Fill character used when a field has no pad character set"""

    overflow: Literal["raise", "truncate"] = "raise"
    """What to do when a rendered number is wider than the field"""

    def __post_init__(self):
        """Validate configuration values after initialization."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}")

        if isinstance(self.default_precision, bool) or not isinstance(self.default_precision, int):
            raise ValueError(f"default_precision must be an integer, got {self.default_precision!r}")

        if self.default_precision < 0:
            raise ValueError(f"default_precision must be non-negative, got {self.default_precision}")

        if not isinstance(self.default_fill, str) or len(self.default_fill) != 1:
            raise ValueError(f"default_fill must be a single character, got {self.default_fill!r}")

        if self.overflow not in ("raise", "truncate"):
            raise ValueError(f"overflow must be 'raise' or 'truncate', got {self.overflow!r}")

    @property
    def level(self) -> int:
        """Numeric logging level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def for_development(cls) -> 'FormatterConfig':
        """Create configuration that reports everything."""
        return cls(
            debug=True,
            log_level="DEBUG",
        )

    @classmethod
    def for_production(cls) -> 'FormatterConfig':
        """Create configuration for batch jobs writing real files."""
        return cls(
            debug=False,
            log_level="WARNING",
            overflow="raise",  # Never emit a shortened number
        )

