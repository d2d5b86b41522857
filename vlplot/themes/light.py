"""Light theme with a white background and saturated colors."""

from vlplot.themes.base import Theme


class LightTheme(Theme):
    """Default light theme."""

    def __init__(self):
        self.name = "light"
        self.background_color = "#FFFFFF"
        self.text_color = "#333333"
        self.grid_color = "#E0E0E0"
        self.default_color = "#1F77B4"
        self.colors = [
            "#1F77B4",  # blue
            "#FF7F0E",  # orange
            "#2CA02C",  # green
            "#D62728",  # red
            "#9467BD",  # purple
            "#8C564B",  # brown
            "#E377C2",  # pink
            "#7F7F7F",  # gray
        ]
        self.font_family = "sans-serif"
        self.font_size = 11

    def get_description(self) -> str:
        return (
            "Clean light theme with a white background and high-contrast colors, "
            "suited to documents and general purpose charts"
        )
