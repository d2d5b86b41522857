"""Line chart of Google's stock price read from a local CSV file."""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from vlplot.builder import ChartBuilder
from vlplot.data import load_csv
from vlplot.gallery.base import ChartExample
from vlplot.spec import Encoding, FilterTransform, Mark, StandardType, Vegalite, X, Y

STOCKS_CSV = Path(__file__).parent / "res" / "stocks.csv"


class StockItem(BaseModel):
    """One row of stocks.csv."""

    symbol: str
    date: str
    price: float


class StockPriceExample(ChartExample):
    """Filters the GOOG rows and draws price over time."""

    def __init__(self, csv_path: Optional[Union[str, Path]] = None):
        self.csv_path = Path(csv_path) if csv_path is not None else STOCKS_CSV

    def build(self) -> Vegalite:
        values = load_csv(self.csv_path, model=StockItem)
        return (
            ChartBuilder()
            .title("Stock price")
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

    def get_description(self) -> str:
        return (
            "Line chart of Google's stock price over time, read from a local CSV "
            "file and filtered with an expression transform"
        )
