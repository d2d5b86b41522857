"""Business light theme."""

from vlplot.themes.base import Theme


class BizLightTheme(Theme):
    """Restrained corporate palette on an off-white background."""

    def __init__(self):
        self.name = "bizlight"
        self.background_color = "#FAFAFA"
        self.text_color = "#2C3E50"
        self.grid_color = "#D5D8DC"
        self.default_color = "#1F4E79"
        self.colors = [
            "#1F4E79",  # navy
            "#2E86C1",  # blue
            "#7F8C8D",  # slate
            "#B9770E",  # amber
            "#117A65",  # teal
            "#6C3483",  # plum
        ]
        self.font_family = "Helvetica, Arial, sans-serif"
        self.font_size = 10

    def get_description(self) -> str:
        return (
            "Professional light theme with a restrained navy and slate palette "
            "for reports and presentations"
        )
