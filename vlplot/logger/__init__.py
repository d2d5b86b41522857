"""
Logger module for vlplot

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from vlplot.logger import Logger, ConsoleLogger

    # Use the shared console logger
    session_logger.info("Chart built", mark="bar")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from vlplot.config import Config
from vlplot.logger.interface import Logger
from vlplot.logger.default_logger import DefaultLogger
from vlplot.logger.console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.getLevelName(Config.get_log_level()))

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
