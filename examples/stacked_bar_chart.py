"""Stacked bar chart of Seattle weather per month."""

import sys

from vlplot import (
    ChartBuilder,
    Color,
    Encoding,
    Mark,
    NonArgAggregateOp,
    Scale,
    StandardType,
    TimeUnit,
    UrlData,
    X,
    Y,
)


def main() -> None:
    chart = (
        ChartBuilder()
        .title("Weather in Seattle")
        .data(
            UrlData(
                url="https://raw.githubusercontent.com/vega/vega-datasets/master/data/seattle-weather.csv"
            )
        )
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
                    scale=Scale(
                        domain=["sun", "fog", "drizzle", "rain", "snow"],
                        range=["#e7ba52", "#c7c7c7", "#aec7e8", "#1f77b4", "#9467bd"],
                    ),
                ),
            )
        )
        .build()
    )

    chart.show()
    print(chart.to_string(), file=sys.stderr)


if __name__ == "__main__":
    main()
