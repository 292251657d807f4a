"""
ExcelWriter — workbook container that table sheets are written into.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from openpyxl import Workbook
from openpyxl.worksheet.table import Table
from openpyxl.worksheet.worksheet import Worksheet

if TYPE_CHECKING:
    from tablesheet.sheet import TableSheet

logger = logging.getLogger(__name__)


class ExcelWriter:
    """Owns one openpyxl workbook and hands out its worksheets."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        logger.debug("Added worksheet %r", title)
        return ws

    def write_table_sheet(self, sheet: "TableSheet", source: Iterable) -> tuple[Worksheet, Table]:
        """Add ``sheet`` as a new worksheet filled from ``source``."""
        return sheet.build_table_sheet(self, source)

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        logger.debug("Saved workbook to %s", path)
        return path
