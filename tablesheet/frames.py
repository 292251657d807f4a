"""
DataFrameTableSheet — a TableSheet whose columns come from a pandas DataFrame.
"""
from __future__ import annotations

import datetime as dt
from operator import itemgetter
from typing import Any, Iterable, Optional

import pandas as pd
from openpyxl.worksheet.table import Table
from openpyxl.worksheet.worksheet import Worksheet

from tablesheet.sheet import TableSheet


def dtype_to_type(dtype) -> type:
    """Python type standing in for a pandas dtype when picking a column format."""
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return dt.datetime
    if pd.api.types.is_timedelta64_dtype(dtype):
        return dt.timedelta
    if pd.api.types.is_bool_dtype(dtype):
        return bool
    if pd.api.types.is_integer_dtype(dtype):
        return int
    if pd.api.types.is_float_dtype(dtype):
        return float
    return object


class DataFrameTableSheet(TableSheet[dict]):
    """One table column per DataFrame column, labelled with the column name."""

    def __init__(self, frame: pd.DataFrame, worksheet_name: str) -> None:
        self.frame = frame
        super().__init__(worksheet_name)

    def configure(self) -> None:
        for col, dtype in self.frame.dtypes.items():
            self.add_property(
                itemgetter(col),
                label=str(col),
                property_type=dtype_to_type(dtype),
                name=str(col),
            )

    def build_table_sheet(
        self, package: Any, source: Optional[Iterable[dict]] = None, start_row: int = 1
    ) -> tuple[Worksheet, Table]:
        """Write ``source`` records, or the frame's own rows when omitted."""
        if source is None:
            source = self.frame
        return super().build_table_sheet(package, source, start_row)
