"""Scatter plot of the rows of a numpy matrix."""

import sys

import numpy as np

from vlplot import ChartBuilder, Encoding, Mark, StandardType, X, Y


def main() -> None:
    # A new matrix with 4 rows and 2 columns.
    values = np.array([[1, 2], [3, 4], [5, 6], [7, 8]])

    # the chart
    chart = (
        ChartBuilder()
        .title("Random points")
        .data(values)
        .mark(Mark.POINT)
        .encoding(
            Encoding(
                x=X(field="0", type=StandardType.QUANTITATIVE),
                y=Y(field="1", type=StandardType.QUANTITATIVE),
            )
        )
        .build()
    )

    chart.show()
    print(chart.to_string(), file=sys.stderr)


if __name__ == "__main__":
    main()
