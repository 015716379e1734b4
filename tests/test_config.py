"""Tests for FormatterConfig."""

from __future__ import annotations

import logging

import pytest

from flatfield.core.config import FormatterConfig
from flatfield.core.types import PRECISION


class TestDefaults:
    def test_defaults(self):
        config = FormatterConfig()
        assert config.debug is False
        assert config.log_level == "WARNING"
        assert config.default_precision == 2
        assert config.default_fill == "0"
        assert config.overflow == "raise"

    def test_default_precision_matches_module_constant(self):
        assert FormatterConfig().default_precision == PRECISION

    def test_level_number(self):
        assert FormatterConfig(log_level="info").level == logging.INFO

    def test_presets(self):
        dev = FormatterConfig.for_development()
        assert dev.debug is True
        assert dev.level == logging.DEBUG

        prod = FormatterConfig.for_production()
        assert prod.debug is False
        assert prod.overflow == "raise"


class TestValidation:
    def test_bad_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            FormatterConfig(log_level="LOUD")

    @pytest.mark.parametrize("precision", [-1, 1.5, True])
    def test_bad_precision(self, precision):
        with pytest.raises(ValueError, match="default_precision"):
            FormatterConfig(default_precision=precision)

    @pytest.mark.parametrize("fill", ["", "ab", 0])
    def test_bad_fill(self, fill):
        with pytest.raises(ValueError, match="default_fill"):
            FormatterConfig(default_fill=fill)

    def test_bad_overflow(self):
        with pytest.raises(ValueError, match="overflow"):
            FormatterConfig(overflow="wrap")  # type: ignore[arg-type]
