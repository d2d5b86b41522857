"""Base exception classes for vlplot.

Every error carries a machine-readable ``code``, a human readable
``message`` and a ``details`` dict with structured context.
"""

from typing import Any, Dict, Optional


class VlplotError(Exception):
    """Root of the vlplot exception hierarchy."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}

    def __str__(self) -> str:
        return self.message


class ValidationError(VlplotError):
    """Input or specification failed validation."""

    pass


class ResourceNotFoundError(VlplotError):
    """A named resource (file, theme, example) does not exist."""

    pass


class ConfigurationError(VlplotError):
    """Invalid runtime configuration."""

    pass


class RegistryError(VlplotError):
    """Lookup in a name registry failed."""

    pass
