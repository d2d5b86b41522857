"""In-memory logger that records entries instead of printing them.

Useful in tests and when embedding vlplot in a host application that
collects records itself.
"""

from typing import Any, Dict, List

from vlplot.logger.interface import Logger


class DefaultLogger(Logger):
    """Collects ``{"level", "message", **context}`` records."""

    def __init__(self):
        self.records: List[Dict[str, Any]] = []

    def _record(self, level: str, message: str, kwargs: Dict[str, Any]) -> None:
        self.records.append({"level": level, "message": message, **kwargs})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, kwargs)

    def messages(self, level: str | None = None) -> List[str]:
        """Return recorded messages, optionally only those at ``level``."""
        return [r["message"] for r in self.records if level is None or r["level"] == level]
