"""
Single source of truth for table styles, comment boxes, and column widths.
"""
from openpyxl.worksheet.table import TableStyleInfo

from tablesheet import config

# ---------------------------------------------------------------------------
# Structured table style
# ---------------------------------------------------------------------------
TABLE_STYLE = config.TABLE_STYLE


def table_style_info(name: str = TABLE_STYLE) -> TableStyleInfo:
    """Banded rows, no first/last column emphasis."""
    return TableStyleInfo(
        name=name,
        showFirstColumn=False,
        showLastColumn=False,
        showRowStripes=True,
        showColumnStripes=False,
    )


# ---------------------------------------------------------------------------
# Comments (sizes in points)
# ---------------------------------------------------------------------------
COMMENT_AUTHOR = config.COMMENT_AUTHOR
COMMENT_WIDTH = 300
COMMENT_HEIGHT = 150

# ---------------------------------------------------------------------------
# Column widths
# ---------------------------------------------------------------------------
MIN_COLUMN_WIDTH = config.MIN_COLUMN_WIDTH
MAX_COLUMN_WIDTH = config.MAX_COLUMN_WIDTH
WIDTH_PADDING = 2
