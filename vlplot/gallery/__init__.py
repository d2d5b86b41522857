"""Gallery registry.

Provides the example charts (choropleth, matrix_scatter, stacked_bar,
stock_price) and a registry for looking them up by name.
"""

from typing import Dict

from vlplot.exceptions import ExampleNotFoundError
from vlplot.gallery.base import ChartExample
from vlplot.gallery.choropleth import ChoroplethExample
from vlplot.gallery.matrix_scatter import MatrixScatterExample
from vlplot.gallery.stacked_bar import StackedBarExample
from vlplot.gallery.stock_price import StockItem, StockPriceExample

# Registry of available examples
_EXAMPLES: Dict[str, ChartExample] = {
    "choropleth": ChoroplethExample(),
    "matrix_scatter": MatrixScatterExample(),
    "stacked_bar": StackedBarExample(),
    "stock_price": StockPriceExample(),
}


def get_example(name: str) -> ChartExample:
    """Get an example by name.

    Args:
        name: Example name (choropleth, matrix_scatter, stacked_bar, stock_price)

    Returns:
        ChartExample instance

    Raises:
        ExampleNotFoundError: If example name is not found
    """
    example_name = name.lower() if name else ""
    example = _EXAMPLES.get(example_name)
    if example is None:
        raise ExampleNotFoundError(name, available=list(_EXAMPLES.keys()))
    return example


def list_examples() -> list[str]:
    """Get a list of available example names."""
    return list(_EXAMPLES.keys())


def list_examples_with_descriptions() -> dict[str, str]:
    """Get all available examples with their descriptions."""
    return {name: example.get_description() for name, example in _EXAMPLES.items()}


__all__ = [
    "ChartExample",
    "ChoroplethExample",
    "MatrixScatterExample",
    "StackedBarExample",
    "StockItem",
    "StockPriceExample",
    "get_example",
    "list_examples",
    "list_examples_with_descriptions",
]
