"""Display exceptions."""

from typing import Any, Dict, Optional

from vlplot.exceptions.base import VlplotError


class DisplayError(VlplotError):
    """Raised when a chart page cannot be written or opened."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="DISPLAY_FAILED", message=message, details=details or {})
