"""Stacked bar chart of Seattle weather by month."""

from vlplot.builder import ChartBuilder
from vlplot.gallery.base import ChartExample
from vlplot.spec import (
    Color,
    Encoding,
    Mark,
    NonArgAggregateOp,
    Scale,
    StandardType,
    TimeUnit,
    UrlData,
    Vegalite,
    X,
    Y,
)

WEATHER_URL = "https://raw.githubusercontent.com/vega/vega-datasets/master/data/seattle-weather.csv"

WEATHER_TYPES = ["sun", "fog", "drizzle", "rain", "snow"]
WEATHER_COLORS = ["#e7ba52", "#c7c7c7", "#aec7e8", "#1f77b4", "#9467bd"]


class StackedBarExample(ChartExample):
    """Counts days per weather type for each month of the year."""

    def build(self) -> Vegalite:
        return (
            ChartBuilder()
            .title("Weather in Seattle")
            .data(UrlData(url=WEATHER_URL))
            .mark(Mark.BAR)
            .encoding(
                Encoding(
                    x=X(
                        field="date",
                        time_unit=TimeUnit.MONTH,
                        type=StandardType.ORDINAL,
                        title="Month of the year",
                    ),
                    y=Y(aggregate=NonArgAggregateOp.COUNT),
                    color=Color(
                        field="weather",
                        scale=Scale(domain=WEATHER_TYPES, range=WEATHER_COLORS),
                    ),
                )
            )
            .build()
        )

    def get_description(self) -> str:
        return (
            "Stacked bar chart counting Seattle days per weather type for each "
            "month, with a custom color scale"
        )
