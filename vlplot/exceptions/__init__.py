"""Custom exceptions for vlplot.

All exceptions carry a code, a message and structured details so callers
can report failures without parsing message text.
"""

from vlplot.exceptions.base import (
    VlplotError,
    ValidationError,
    ResourceNotFoundError,
    ConfigurationError,
    RegistryError,
)
from vlplot.exceptions.build import SpecBuildError
from vlplot.exceptions.data import DataLoadError
from vlplot.exceptions.display import DisplayError
from vlplot.exceptions.registry import ThemeNotFoundError, ExampleNotFoundError

__all__ = [
    # Base exceptions
    "VlplotError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "RegistryError",
    # Specific exceptions
    "SpecBuildError",
    "DataLoadError",
    "DisplayError",
    "ThemeNotFoundError",
    "ExampleNotFoundError",
]
