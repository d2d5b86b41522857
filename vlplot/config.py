"""Centralized configuration and defaults for vlplot.

All settings come from environment variables so that the example programs
stay argument-free.

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================
#
# VLPLOT_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
#
# VLPLOT_OUTPUT_DIR: Directory where rendered HTML pages are written
#   (default: a "vlplot" folder in the system temp directory)
#
# VLPLOT_OPEN_BROWSER: Open rendered pages in the default browser
#   (default: true). Set to 0/false/no to only write the page.
#
# VLPLOT_THEME: Theme applied by show() when none is given (default: unset)
#
# VLPLOT_VEGA_VERSION / VLPLOT_VEGA_LITE_VERSION / VLPLOT_VEGA_EMBED_VERSION:
#   Major versions of the JavaScript libraries loaded from the CDN
#   (defaults: 5 / 4 / 6)
"""

import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_OPEN_BROWSER = True
DEFAULT_VEGA_VERSION = "5"
DEFAULT_VEGA_LITE_VERSION = "4"
DEFAULT_VEGA_EMBED_VERSION = "6"
DEFAULT_CDN_URL = "https://cdn.jsdelivr.net/npm"

SCHEMA_URL = "https://vega.github.io/schema/vega-lite/v4.json"
VEGALITE_MIMETYPE = "application/vnd.vegalite.v4+json"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Config:
    """Typed accessors over the VLPLOT_* environment variables."""

    @staticmethod
    def get_log_level() -> str:
        level = os.getenv("VLPLOT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if level not in _VALID_LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level

    @staticmethod
    def get_output_dir() -> Path:
        configured = os.getenv("VLPLOT_OUTPUT_DIR")
        if configured:
            return Path(configured)
        return Path(tempfile.gettempdir()) / "vlplot"

    @staticmethod
    def get_open_browser() -> bool:
        value = os.getenv("VLPLOT_OPEN_BROWSER")
        if value is None:
            return DEFAULT_OPEN_BROWSER
        return value.strip().lower() not in _FALSE_VALUES

    @staticmethod
    def get_theme() -> Optional[str]:
        return os.getenv("VLPLOT_THEME") or None

    @staticmethod
    def get_library_versions() -> Dict[str, str]:
        return {
            "vega": os.getenv("VLPLOT_VEGA_VERSION", DEFAULT_VEGA_VERSION),
            "vega_lite": os.getenv("VLPLOT_VEGA_LITE_VERSION", DEFAULT_VEGA_LITE_VERSION),
            "vega_embed": os.getenv("VLPLOT_VEGA_EMBED_VERSION", DEFAULT_VEGA_EMBED_VERSION),
        }


def get_config_summary() -> Dict[str, Any]:
    """Get a summary of current configuration from environment."""
    return {
        "log_level": Config.get_log_level(),
        "output_dir": str(Config.get_output_dir()),
        "open_browser": Config.get_open_browser(),
        "theme": Config.get_theme(),
        "library_versions": Config.get_library_versions(),
        "schema_url": SCHEMA_URL,
    }
