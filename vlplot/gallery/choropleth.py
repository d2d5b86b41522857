"""Choropleth map of US unemployment by county."""

from vlplot.builder import ChartBuilder
from vlplot.gallery.base import ChartExample
from vlplot.spec import (
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
    Vegalite,
)

DATASETS_URL = "https://raw.githubusercontent.com/vega/vega-datasets/master/data"


class ChoroplethExample(ChartExample):
    """County shapes joined with unemployment rates by county id."""

    def build(self) -> Vegalite:
        return (
            ChartBuilder()
            .title("Choropleth of Unemployment Rate per County")
            .data(
                UrlData(
                    url=f"{DATASETS_URL}/us-10m.json",
                    format=DataFormat(type=DataFormatType.TOPOJSON, feature="counties"),
                )
            )
            .mark(Mark.GEOSHAPE)
            .transform(
                LookupTransform(
                    lookup="id",
                    from_=LookupData(
                        data=UrlData(url=f"{DATASETS_URL}/unemployment.tsv"),
                        key="id",
                        fields=["rate"],
                    ),
                )
            )
            .projection(Projection(type=ProjectionType.ALBERS_USA))
            .encoding(Encoding(color=Color(field="rate", type=StandardType.QUANTITATIVE)))
            .build()
        )

    def get_description(self) -> str:
        return (
            "Choropleth map of US counties from TopoJSON, colored by unemployment "
            "rate joined in through a lookup transform"
        )
