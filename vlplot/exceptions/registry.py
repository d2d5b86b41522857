"""Registry lookup exceptions for themes and gallery examples."""

from typing import List, Optional

from vlplot.exceptions.base import RegistryError


class ThemeNotFoundError(RegistryError):
    """Raised when a theme cannot be found."""

    def __init__(self, theme: str, available: Optional[List[str]] = None):
        available_text = ""
        if available:
            available_text = f" Available themes: {', '.join(available)}."
        super().__init__(
            code="THEME_NOT_FOUND",
            message=f"Unknown theme '{theme}'.{available_text}",
            details={"theme": theme, "available": available or []},
        )
        self.theme = theme


class ExampleNotFoundError(RegistryError):
    """Raised when a gallery example cannot be found."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        available_text = ""
        if available:
            available_text = f" Available examples: {', '.join(available)}."
        super().__init__(
            code="EXAMPLE_NOT_FOUND",
            message=f"Unknown example '{name}'.{available_text}",
            details={"example": name, "available": available or []},
        )
        self.name = name
