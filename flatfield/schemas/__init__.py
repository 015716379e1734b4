"""Pydantic schemas for field configuration."""

from .field_spec import FieldSpec

__all__ = ["FieldSpec"]
