"""Console logger backed by the standard ``logging`` module."""

import logging
import sys
from typing import Any

from vlplot.logger.interface import Logger


def _format_context(kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in kwargs.items())


class ConsoleLogger(Logger):
    """Writes ``message key=value ...`` lines to stderr."""

    def __init__(self, name: str = "vlplot", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message + _format_context(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message + _format_context(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message + _format_context(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message + _format_context(kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(message + _format_context(kwargs))
