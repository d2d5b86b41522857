"""External display of chart specifications."""

from vlplot.display.renderer import HtmlRenderer
from vlplot.display.viewer import page_name, show

__all__ = [
    "HtmlRenderer",
    "page_name",
    "show",
]
