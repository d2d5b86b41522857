"""Schema-mirrored value objects for Vega-Lite v4 specifications."""

from vlplot.spec.data import Data, DataFormat, InlineData, UrlData
from vlplot.spec.encoding import (
    Axis,
    Color,
    Encoding,
    FieldDef,
    Legend,
    MarkPropFieldDef,
    PositionFieldDef,
    Scale,
    X,
    Y,
)
from vlplot.spec.enums import (
    DataFormatType,
    Mark,
    NonArgAggregateOp,
    ProjectionType,
    ScaleType,
    StandardType,
    TimeUnit,
)
from vlplot.spec.mark import MarkDef, mark_type
from vlplot.spec.projection import Projection
from vlplot.spec.transform import (
    CalculateTransform,
    FilterTransform,
    LookupData,
    LookupTransform,
    Transform,
)
from vlplot.spec.vegalite import Vegalite

__all__ = [
    "Axis",
    "CalculateTransform",
    "Color",
    "Data",
    "DataFormat",
    "DataFormatType",
    "Encoding",
    "FieldDef",
    "FilterTransform",
    "InlineData",
    "Legend",
    "LookupData",
    "LookupTransform",
    "Mark",
    "MarkDef",
    "MarkPropFieldDef",
    "NonArgAggregateOp",
    "PositionFieldDef",
    "Projection",
    "ProjectionType",
    "Scale",
    "ScaleType",
    "StandardType",
    "TimeUnit",
    "Transform",
    "UrlData",
    "Vegalite",
    "X",
    "Y",
    "mark_type",
]
