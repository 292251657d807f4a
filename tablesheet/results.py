"""
Per-cell outcome of calling a column accessor, and how each outcome is written.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, KNOWN_TYPES

from tablesheet.exceptions import AccessorInvocationError, FailedToGetTableValueError

if TYPE_CHECKING:
    from tablesheet.columns import TableSheetColumn


@dataclass(frozen=True)
class Extracted:
    value: Any


@dataclass(frozen=True)
class ExtractionFailed:
    property: str
    detail: str


@dataclass(frozen=True)
class Skipped:
    detail: str


@dataclass(frozen=True)
class Unexpected:
    property: str
    detail: str


CellResult = Union[Extracted, ExtractionFailed, Skipped, Unexpected]


def extract(column: "TableSheetColumn", element: Any) -> CellResult:
    """Call the column's accessor and classify the outcome. Never raises."""
    try:
        return Extracted(column.getter(element))
    except FailedToGetTableValueError as exc:
        return ExtractionFailed(exc.property, str(exc))
    except AccessorInvocationError as exc:
        return Skipped(str(exc))
    except Exception as exc:
        return Unexpected(column.name, f"{type(exc).__name__}: {exc}")


def is_null(value: Any) -> bool:
    """None, NaN, NaT and pd.NA all count as missing."""
    if value is None:
        return True
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _display_value(value: Any, property_type: type) -> Any:
    if isinstance(property_type, type) and issubclass(property_type, Enum):
        if isinstance(value, property_type):
            return value.name
        try:
            return property_type(value).name
        except (ValueError, TypeError):
            return ILLEGAL_CHARACTERS_RE.sub("", str(value))
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, pd.Timedelta):
        return value.to_pytimedelta()
    if isinstance(value, (dt.datetime, dt.time)) and value.tzinfo is not None:
        # Excel has no timezones; keep the wall-clock time
        return value.replace(tzinfo=None)
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    if isinstance(value, KNOWN_TYPES):
        return value
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


def render_cell(result: CellResult, column: "TableSheetColumn") -> tuple[Any, Optional[str]]:
    """Map an accessor outcome to ``(cell value, comment text or None)``.

    Every failure writes an empty cell. Extraction failures and unexpected
    errors are annotated; ``Skipped`` is not.
    """
    if isinstance(result, Extracted):
        if is_null(result.value):
            return "", None
        return _display_value(result.value, column.property_type), None
    if isinstance(result, ExtractionFailed):
        return "", ILLEGAL_CHARACTERS_RE.sub("", f"Error: {result.detail}")
    if isinstance(result, Unexpected):
        return "", ILLEGAL_CHARACTERS_RE.sub("", f"Error: {result.detail}\nProperty: {result.property}")
    if isinstance(result, Skipped):
        return "", None
    raise TypeError(f"Unknown cell result: {result!r}")
