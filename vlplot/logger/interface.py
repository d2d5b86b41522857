"""Logger interface.

Every component takes an optional ``Logger`` and falls back to the shared
``session_logger``. Keyword arguments carry structured context.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logger accepting a message plus structured context."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
