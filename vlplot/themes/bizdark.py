"""Business dark theme."""

from vlplot.themes.base import Theme


class BizDarkTheme(Theme):
    """Corporate palette on a dark slate background."""

    def __init__(self):
        self.name = "bizdark"
        self.background_color = "#17202A"
        self.text_color = "#D6DBDF"
        self.grid_color = "#34495E"
        self.default_color = "#5499C7"
        self.colors = [
            "#5499C7",  # steel blue
            "#48C9B0",  # teal
            "#F5B041",  # amber
            "#AAB7B8",  # silver
            "#A569BD",  # violet
            "#EC7063",  # coral
        ]
        self.font_family = "Helvetica, Arial, sans-serif"
        self.font_size = 10

    def get_description(self) -> str:
        return (
            "Professional dark theme with steel blue and teal accents "
            "for dashboards and on-screen presentations"
        )
