"""Base class for gallery chart examples."""

from abc import ABC, abstractmethod

from vlplot.spec.vegalite import Vegalite


class ChartExample(ABC):
    """A named, self-contained chart specification."""

    @abstractmethod
    def build(self) -> Vegalite:
        """Build the chart specification."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the example."""
        pass
