"""
TableSheet — Configuration: table styling, comment author, column widths, logging.

Every value can be overridden with a TABLESHEET_* environment variable.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Structured table appearance
# ---------------------------------------------------------------------------
TABLE_STYLE = os.environ.get("TABLESHEET_TABLE_STYLE", "TableStyleMedium2")

# ---------------------------------------------------------------------------
# Cell comments written for values that failed to load
# ---------------------------------------------------------------------------
COMMENT_AUTHOR = os.environ.get("TABLESHEET_COMMENT_AUTHOR", "TableSheet")

# ---------------------------------------------------------------------------
# Auto-fit bounds (character widths)
# ---------------------------------------------------------------------------
MIN_COLUMN_WIDTH = int(os.environ.get("TABLESHEET_MIN_COLUMN_WIDTH", "10"))
MAX_COLUMN_WIDTH = int(os.environ.get("TABLESHEET_MAX_COLUMN_WIDTH", "55"))

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------
OUTPUT_DIR = Path(os.environ.get("TABLESHEET_OUTPUT_DIR", str(Path.cwd() / "exports")))
LOG_LEVEL = os.environ.get("TABLESHEET_LOG_LEVEL", "WARNING").upper()
