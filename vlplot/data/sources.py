"""Data acquisition helpers.

Turn in-memory matrices, record sequences and local CSV files into
``InlineData`` values. Parsing itself is left to numpy and pandas.
"""

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vlplot.exceptions import DataLoadError
from vlplot.logger import Logger, session_logger
from vlplot.spec.data import InlineData, UrlData


def _to_python(value: Any) -> Any:
    """Unwrap numpy scalars into plain Python values for JSON output."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def from_matrix(matrix: Any) -> InlineData:
    """Convert a 2-D matrix to inline rows keyed by column index.

    Row ``[1, 2]`` becomes ``{"0": 1, "1": 2}``, so encodings refer to
    columns as ``field="0"``, ``field="1"``, ...

    Raises:
        DataLoadError: If the input is not two-dimensional
    """
    array = np.asarray(matrix)
    if array.ndim != 2:
        raise DataLoadError(
            f"Matrix data must be two-dimensional, got {array.ndim} dimension(s)",
            details={"shape": list(array.shape)},
        )
    rows = [
        {str(col): _to_python(array[row, col]) for col in range(array.shape[1])}
        for row in range(array.shape[0])
    ]
    return InlineData(values=rows)


def _record_to_dict(record: Any) -> Dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    if isinstance(record, dict):
        return {str(k): _to_python(v) for k, v in record.items()}
    raise DataLoadError(
        f"Unsupported record type '{type(record).__name__}'",
        details={"expected": "dict, pydantic model or dataclass instance"},
    )


def from_records(records: Union[pd.DataFrame, Iterable[Any]]) -> InlineData:
    """Convert a DataFrame or a sequence of records to inline rows."""
    if isinstance(records, pd.DataFrame):
        rows = [
            {str(k): _to_python(v) for k, v in row.items()}
            for row in records.to_dict(orient="records")
        ]
        return InlineData(values=rows)
    return InlineData(values=[_record_to_dict(r) for r in records])


def load_csv(
    path: Union[str, Path],
    model: Optional[Type[BaseModel]] = None,
    logger: Optional[Logger] = None,
) -> List[Any]:
    """Read a local CSV file into a list of rows.

    Args:
        path: Path to the CSV file
        model: Optional pydantic model each row is validated into

    Returns:
        List of model instances when ``model`` is given, else list of dicts

    Raises:
        DataLoadError: If the file is missing, empty, malformed, or a row
            does not validate against ``model``
    """
    log = logger or session_logger
    csv_path = Path(path)
    if not csv_path.is_file():
        raise DataLoadError(f"CSV file not found: {csv_path}", source=str(csv_path))

    # With a model, cells stay text and the model does the type coercion.
    read_options = {"dtype": str, "keep_default_na": False} if model is not None else {}
    try:
        frame = pd.read_csv(csv_path, **read_options)
    except pd.errors.EmptyDataError as e:
        raise DataLoadError(f"CSV file is empty: {csv_path}", source=str(csv_path)) from e
    except pd.errors.ParserError as e:
        raise DataLoadError(
            f"Failed to parse CSV file {csv_path}: {e}", source=str(csv_path)
        ) from e

    rows = [
        {str(k): _to_python(v) for k, v in row.items()}
        for row in frame.to_dict(orient="records")
    ]
    log.debug("Loaded CSV", path=str(csv_path), rows=len(rows), columns=len(frame.columns))

    if model is None:
        return rows

    items = []
    for line, row in enumerate(rows, start=2):
        try:
            items.append(model.model_validate(row))
        except PydanticValidationError as e:
            raise DataLoadError(
                f"Row {line} of {csv_path} does not match {model.__name__}",
                source=str(csv_path),
                details={"line": line, "errors": e.errors(include_url=False)},
            ) from e
    return items


def _is_row_sequence(value: Any) -> bool:
    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes))


def to_data(value: Any) -> Union[UrlData, InlineData]:
    """Coerce builder input into a data reference.

    Accepts ``UrlData`` / ``InlineData``, a 2-D numpy array or nested list,
    a DataFrame, or a sequence of records (dicts, pydantic models, dataclasses).
    """
    if isinstance(value, (UrlData, InlineData)):
        return value
    if isinstance(value, np.ndarray):
        return from_matrix(value)
    if isinstance(value, pd.DataFrame):
        return from_records(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if value and all(_is_row_sequence(row) for row in value):
            return from_matrix(value)
        return from_records(value)
    raise DataLoadError(
        f"Cannot use value of type '{type(value).__name__}' as chart data",
        details={"expected": "UrlData, InlineData, numpy array, DataFrame or records"},
    )
