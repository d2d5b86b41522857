"""vlplot: typed builders for Vega-Lite chart specifications.

Specifications are assembled from immutable pydantic models, serialized
to the grammar's JSON text, and handed to a browser for rendering.
"""

from vlplot.builder import ChartBuilder
from vlplot.data import from_matrix, from_records, load_csv
from vlplot.display import HtmlRenderer, show
from vlplot.spec import *  # noqa: F401,F403
from vlplot.spec import __all__ as _spec_all
from vlplot.validation import SpecValidator

__version__ = "0.1.0"

__all__ = [
    "ChartBuilder",
    "HtmlRenderer",
    "SpecValidator",
    "from_matrix",
    "from_records",
    "load_csv",
    "show",
    *_spec_all,
]
