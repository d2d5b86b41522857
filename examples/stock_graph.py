"""Line chart of Google's stock price from a local CSV file.

Equivalent JSON:

    {
      "$schema": "https://vega.github.io/schema/vega-lite/v4.json",
      "description": "Google's stock price over time.",
      "data": {"url": "data/stocks.csv"},
      "transform": [{"filter": "datum.symbol==='GOOG'"}],
      "mark": "line",
      "encoding": {
        "x": {"field": "date", "type": "temporal"},
        "y": {"field": "price", "type": "quantitative"}
      }
    }
"""

import sys

from pydantic import BaseModel

from vlplot import (
    ChartBuilder,
    Encoding,
    FilterTransform,
    Mark,
    StandardType,
    X,
    Y,
    load_csv,
)
from vlplot.gallery.stock_price import STOCKS_CSV


class Item(BaseModel):
    symbol: str
    date: str
    price: float


def main() -> None:
    # input data: a CSV parsed into a list of `Item`
    values = load_csv(STOCKS_CSV, model=Item)

    chart = (
        ChartBuilder()
        .title("Stock price")
        # .width(400)
        # .height(200)
        .description("Google's stock price over time.")
        .data(values)
        .transform(FilterTransform(filter="datum.symbol==='GOOG'"))
        .mark(Mark.LINE)
        .encoding(
            Encoding(
                x=X(field="date", type=StandardType.TEMPORAL),
                y=Y(field="price", type=StandardType.QUANTITATIVE),
            )
        )
        .build()
    )

    chart.show()
    print(chart.to_string(), file=sys.stderr)


if __name__ == "__main__":
    main()
