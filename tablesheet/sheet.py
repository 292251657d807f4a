"""
TableSheet — register columns for an element type, then write elements as a structured Excel table.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.table import Table
from openpyxl.worksheet.worksheet import Worksheet

from tablesheet.columns import Key, TableSheetColumn
from tablesheet.exceptions import EmptyTableError, InvalidStartRowError
from tablesheet.excel.formatters import (
    add_cell_comment,
    auto_fit_column,
    range_ref,
    set_column_format,
    table_display_name,
)
from tablesheet.excel.styles import table_style_info
from tablesheet.results import Extracted, extract, render_cell

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableSheet(Generic[T]):
    """A structured table built from a sequence of ``T``.

    Subclass it, set ``worksheet_name`` (and ``element_type`` to get labels
    and formats from type hints), and register columns in ``configure``::

        class OrderSheet(TableSheet[Order]):
            worksheet_name = "Open Orders"
            element_type = Order

            def configure(self):
                self.add_property("number", "Order #")
                self.add_property("placed_at")          # label "datetime"
                self.add_property(lambda o: o.total, "Total", formats.NUMBER_TWO_DECIMAL_PLACES)
    """

    worksheet_name: str = ""
    element_type: Optional[type] = None

    def __init__(self, worksheet_name: Optional[str] = None, element_type: Optional[type] = None) -> None:
        if worksheet_name is not None:
            self.worksheet_name = worksheet_name
        if element_type is not None:
            self.element_type = element_type
        if not self.worksheet_name:
            raise ValueError(f"{type(self).__name__} needs a worksheet_name")
        self._columns: list[TableSheetColumn] = []
        self._label_index: dict[str, int] = {}
        self.configure()

    def configure(self) -> None:
        """Hook for subclasses to register their columns."""

    # ------------------------------------------------------------------
    # Column registry
    # ------------------------------------------------------------------

    def add_property(
        self,
        key: Key,
        label: str = "",
        format: str = "",
        property_type: Optional[type] = None,
        name: Optional[str] = None,
    ) -> uuid.UUID:
        """Register a column and return its id.

        Labels are unique per table, ignoring case; a repeated label gets
        ``_1``, ``_2``, ... appended.
        """
        column = TableSheetColumn.create(
            key, label, format,
            property_type=property_type,
            element_type=self.element_type,
            name=name,
        )
        named_after_label = name is None and column.name == column.label
        column.label = self._unique_label(column.label)
        if named_after_label:
            column.name = column.label
        self._label_index[column.label.casefold()] = len(self._columns)
        self._columns.append(column)
        return column.guid

    def _unique_label(self, label: str) -> str:
        if label.casefold() not in self._label_index:
            return label
        n = 1
        while f"{label}_{n}".casefold() in self._label_index:
            n += 1
        return f"{label}_{n}"

    @property
    def columns(self) -> tuple[TableSheetColumn, ...]:
        return tuple(self._columns)

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self._columns]

    def column(self, guid: uuid.UUID) -> TableSheetColumn:
        for c in self._columns:
            if c.guid == guid:
                return c
        raise KeyError(guid)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[TableSheetColumn]:
        return iter(self._columns)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def build_table_sheet(
        self, package: Any, source: Iterable[T], start_row: int = 1
    ) -> tuple[Worksheet, Table]:
        """Add a worksheet to ``package`` holding ``source`` as a formatted table.

        ``package`` is an ``ExcelWriter`` or an openpyxl ``Workbook``.
        Column widths are auto-fit afterwards; a column that can't be
        fitted keeps its default width.
        """
        if isinstance(package, Workbook):
            ws = package.create_sheet(title=self.worksheet_name)
        else:
            ws = package.add_sheet(self.worksheet_name)

        table = self.build_table(ws, start_row, source)

        for col_num in range(1, len(self._columns) + 1):
            try:
                auto_fit_column(ws, col_num)
            except Exception:
                pass
        return ws, table

    def build_table(self, worksheet: Worksheet, start_row: int, source: Iterable[T]) -> Table:
        """Write header + body starting at ``start_row`` and register the range as a table."""
        if not self._columns:
            raise EmptyTableError(f"{type(self).__name__} has no columns to write")

        last_header_row = self.build_header_row(worksheet, start_row)
        last_body_row = self.build_table_body(worksheet, last_header_row + 1, source)

        table = Table(
            displayName=table_display_name(self.worksheet_name),
            ref=range_ref(last_header_row, 1, last_body_row, len(self._columns)),
        )
        table.tableStyleInfo = table_style_info()
        worksheet.add_table(table)
        logger.debug("Added table %s at %s on %r", table.displayName, table.ref, worksheet.title)
        return table

    def build_header_row(self, worksheet: Worksheet, start_row: int) -> int:
        """Write column labels. Returns the last header row."""
        if start_row < 1:
            raise InvalidStartRowError("Row index must be greater than or equal to 1.")

        for col_num, column in enumerate(self._columns, 1):
            worksheet.cell(row=start_row, column=col_num).value = column.label
            if column.format:
                set_column_format(worksheet, col_num, column.format)
        return start_row

    def build_table_body(self, worksheet: Worksheet, start_row: int, source: Iterable[T]) -> int:
        """Write one row per element. Returns the last row written (the header row if none)."""
        if isinstance(source, pd.DataFrame):
            source = source.to_dict("records")

        row = start_row
        for element in source:
            for col_num, column in enumerate(self._columns, 1):
                result = extract(column, element)
                value, comment = render_cell(result, column)
                if not isinstance(result, Extracted):
                    logger.debug(
                        "Row %d, column %d (%s): %s", row, col_num, column.label, type(result).__name__
                    )

                cell = worksheet.cell(row=row, column=col_num)
                cell.value = value
                if column.format:
                    cell.number_format = column.format
                if comment:
                    add_cell_comment(cell, comment)
            row += 1

        return row - 1
