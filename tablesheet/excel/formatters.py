"""
Reusable Excel cell/column helpers for table sheets.
"""
from __future__ import annotations

import re

from openpyxl.cell.cell import Cell
from openpyxl.comments import Comment
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from tablesheet.excel.styles import (
    COMMENT_AUTHOR, COMMENT_WIDTH, COMMENT_HEIGHT,
    MIN_COLUMN_WIDTH, MAX_COLUMN_WIDTH, WIDTH_PADDING,
)


_INVALID_TABLE_NAME_CHARS = re.compile(r"[^0-9A-Za-z_.\\]")


# ---------------------------------------------------------------------------
# Ranges and names
# ---------------------------------------------------------------------------

def range_ref(first_row: int, first_col: int, last_row: int, last_col: int) -> str:
    """A1-style reference for a rectangular range, e.g. ``A1:C4``."""
    return f"{get_column_letter(first_col)}{first_row}:{get_column_letter(last_col)}{last_row}"


def table_display_name(worksheet_name: str) -> str:
    """Table name derived from a sheet title: spaces become underscores."""
    name = _INVALID_TABLE_NAME_CHARS.sub("_", worksheet_name.replace(" ", "_"))
    if not name or not (name[0].isalpha() or name[0] in "_\\"):
        name = f"_{name}"
    return name


# ---------------------------------------------------------------------------
# Column number format
# ---------------------------------------------------------------------------

def set_column_format(ws: Worksheet, col_num: int, number_format: str) -> None:
    """Apply a number format to a whole column."""
    ws.column_dimensions[get_column_letter(col_num)].number_format = number_format


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def add_cell_comment(cell: Cell, text: str, author: str = COMMENT_AUTHOR) -> Comment:
    """Attach a diagnostic comment to a cell, replacing any existing one."""
    comment = Comment(text, author, width=COMMENT_WIDTH, height=COMMENT_HEIGHT)
    cell.comment = comment
    return comment


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def auto_fit_column(
    ws: Worksheet,
    col_num: int,
    min_width: int = MIN_COLUMN_WIDTH,
    max_width: int = MAX_COLUMN_WIDTH,
) -> float:
    """Fit one column's width to its longest value. Returns the width set."""
    max_length = 0
    for (cell,) in ws.iter_rows(min_col=col_num, max_col=col_num):
        if cell.value is None:
            continue
        cell_length = max(len(line) for line in str(cell.value).splitlines() or [""])
        if cell_length > max_length:
            max_length = cell_length
    adjusted = min(max(max_length + WIDTH_PADDING, min_width), max_width)
    ws.column_dimensions[get_column_letter(col_num)].width = adjusted
    return adjusted
