"""Theme registry.

Provides visual themes (light, dark, bizlight, bizdark) and a registry
for looking them up by name.
"""

from typing import Any, Dict, Optional

from vlplot.exceptions import ThemeNotFoundError
from vlplot.themes.base import Theme
from vlplot.themes.light import LightTheme
from vlplot.themes.dark import DarkTheme
from vlplot.themes.bizlight import BizLightTheme
from vlplot.themes.bizdark import BizDarkTheme

# Registry of available themes
_THEMES: Dict[str, Theme] = {
    "light": LightTheme(),
    "dark": DarkTheme(),
    "bizlight": BizLightTheme(),
    "bizdark": BizDarkTheme(),
}


def get_theme(name: str = "light") -> Theme:
    """Get a theme by name.

    Args:
        name: Theme name (light, dark, bizlight, bizdark)

    Returns:
        Theme instance

    Raises:
        ThemeNotFoundError: If theme name is not found
    """
    theme_name = name.lower() if name else "light"
    theme = _THEMES.get(theme_name)
    if theme is None:
        raise ThemeNotFoundError(name, available=list(_THEMES.keys()))
    return theme


def get_theme_config(name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Vega-Lite ``config`` block for a theme, with ``overrides`` applied on top.

    Top-level keys in ``overrides`` replace the theme's keys entirely.

    Raises:
        ThemeNotFoundError: If theme name is not found
    """
    return {**get_theme(name).get_config(), **(overrides or {})}


def list_themes() -> list[str]:
    """Get a list of available theme names."""
    return list(_THEMES.keys())


def list_themes_with_descriptions() -> Dict[str, str]:
    """Get a dictionary of theme names to their descriptions."""
    return {name: theme.get_description() for name, theme in _THEMES.items()}


__all__ = [
    "Theme",
    "LightTheme",
    "DarkTheme",
    "BizLightTheme",
    "BizDarkTheme",
    "get_theme",
    "get_theme_config",
    "list_themes",
    "list_themes_with_descriptions",
]
