"""Scatter plot of the rows of a small matrix."""

import numpy as np

from vlplot.builder import ChartBuilder
from vlplot.gallery.base import ChartExample
from vlplot.spec import Encoding, Mark, StandardType, Vegalite, X, Y

# 4 rows, 2 columns
POINTS = np.array([[1, 2], [3, 4], [5, 6], [7, 8]])


class MatrixScatterExample(ChartExample):
    """Plots column 0 against column 1 of an in-memory matrix."""

    def build(self) -> Vegalite:
        return (
            ChartBuilder()
            .title("Random points")
            .data(POINTS)
            .mark(Mark.POINT)
            .encoding(
                Encoding(
                    x=X(field="0", type=StandardType.QUANTITATIVE),
                    y=Y(field="1", type=StandardType.QUANTITATIVE),
                )
            )
            .build()
        )

    def get_description(self) -> str:
        return "Scatter plot of an in-memory numeric matrix, one point per row"
