"""Specification build exceptions."""

from typing import Any, Dict, List, Optional

from vlplot.exceptions.base import ValidationError


class SpecBuildError(ValidationError):
    """Raised when a chart specification cannot be built.

    ``issues`` holds one dict per problem (``field``, ``message`` and,
    where available, ``expected`` and ``suggestions``).
    """

    def __init__(self, message: str, issues: Optional[List[Dict[str, Any]]] = None):
        self.issues = issues or []
        super().__init__(
            code="SPEC_BUILD_FAILED",
            message=message,
            details={"issues": self.issues},
        )
