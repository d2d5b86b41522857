"""Data acquisition helpers for chart specifications."""

from vlplot.data.sources import from_matrix, from_records, load_csv, to_data

__all__ = [
    "from_matrix",
    "from_records",
    "load_csv",
    "to_data",
]
