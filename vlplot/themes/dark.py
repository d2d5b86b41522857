"""Dark theme with muted colors for reduced eye strain."""

from vlplot.themes.base import Theme


class DarkTheme(Theme):
    """Dark theme with muted colors for reduced eye strain."""

    def __init__(self):
        self.name = "dark"
        self.background_color = "#1E1E1E"
        self.text_color = "#E0E0E0"
        self.grid_color = "#3A3A3A"
        self.default_color = "#5DADE2"
        self.colors = [
            "#5DADE2",  # light blue
            "#F39C12",  # orange
            "#58D68D",  # green
            "#EC7063",  # red
            "#BB8FCE",  # purple
            "#E59866",  # brown
            "#F1948A",  # pink
            "#AEB6BF",  # gray
        ]
        self.font_family = "sans-serif"
        self.font_size = 10

    def get_description(self) -> str:
        return (
            "Dark theme with muted colors designed to reduce eye strain, "
            "perfect for extended viewing sessions and low-light environments"
        )
