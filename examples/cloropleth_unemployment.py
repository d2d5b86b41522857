"""Choropleth of unemployment rate per US county."""

import sys

from vlplot import (
    ChartBuilder,
    Color,
    DataFormat,
    DataFormatType,
    Encoding,
    LookupData,
    LookupTransform,
    Mark,
    Projection,
    ProjectionType,
    StandardType,
    UrlData,
)


def main() -> None:
    # the chart
    chart = (
        ChartBuilder()
        .title("Choropleth of Unemployment Rate per County")
        .data(
            UrlData(
                url="https://raw.githubusercontent.com/vega/vega-datasets/master/data/us-10m.json",
                format=DataFormat(type=DataFormatType.TOPOJSON, feature="counties"),
            )
        )
        .mark(Mark.GEOSHAPE)
        .transform(
            LookupTransform(
                lookup="id",
                from_=LookupData(
                    data=UrlData(
                        url="https://raw.githubusercontent.com/vega/vega-datasets/master/data/unemployment.tsv"
                    ),
                    key="id",
                    fields=["rate"],
                ),
            )
        )
        .projection(Projection(type=ProjectionType.ALBERS_USA))
        .encoding(Encoding(color=Color(field="rate", type=StandardType.QUANTITATIVE)))
        .build()
    )

    # display the chart in the browser
    chart.show()

    # print the vega lite spec
    print(chart.to_string(), file=sys.stderr)


if __name__ == "__main__":
    main()
