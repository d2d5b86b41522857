"""Specification validation."""

from vlplot.validation.validator import (
    SpecValidator,
    ValidationIssue,
    ValidationResult,
    is_valid_color,
)

__all__ = [
    "SpecValidator",
    "ValidationIssue",
    "ValidationResult",
    "is_valid_color",
]
