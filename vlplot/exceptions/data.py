"""Data acquisition exceptions."""

from typing import Any, Dict, Optional

from vlplot.exceptions.base import ValidationError


class DataLoadError(ValidationError):
    """Raised when chart data cannot be read or converted."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = dict(details or {})
        if source is not None:
            merged["source"] = source
        super().__init__(code="DATA_LOAD_FAILED", message=message, details=merged)
        self.source = source
