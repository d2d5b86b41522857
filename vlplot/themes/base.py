"""Base class for visual themes."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Theme(ABC):
    """A named palette and typography translated into a Vega-Lite config block."""

    name: str = ""
    background_color: str = "#FFFFFF"
    text_color: str = "#000000"
    grid_color: str = "#DDDDDD"
    default_color: str = "#4C78A8"
    colors: list[str] = []
    font_family: str = "sans-serif"
    font_size: int = 10

    def get_default_color(self) -> str:
        return self.default_color

    def get_colors(self) -> list[str]:
        return list(self.colors)

    def get_config(self) -> Dict[str, Any]:
        """Vega-Lite ``config`` block for this theme."""
        axis = {
            "domainColor": self.grid_color,
            "gridColor": self.grid_color,
            "tickColor": self.grid_color,
            "labelColor": self.text_color,
            "titleColor": self.text_color,
            "labelFont": self.font_family,
            "titleFont": self.font_family,
            "labelFontSize": self.font_size,
            "titleFontSize": self.font_size,
        }
        return {
            "background": self.background_color,
            "font": self.font_family,
            "title": {
                "color": self.text_color,
                "font": self.font_family,
                "fontSize": self.font_size + 2,
            },
            "axis": axis,
            "legend": {
                "labelColor": self.text_color,
                "titleColor": self.text_color,
                "labelFontSize": self.font_size,
                "titleFontSize": self.font_size,
            },
            "view": {"stroke": self.grid_color},
            "mark": {"color": self.default_color},
            "range": {"category": self.get_colors()},
        }

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the theme."""
        pass
