"""
Common and custom Excel number formats for table columns.
"""

# ---------------------------------------------------------------------------
# Standard Excel formats
# ---------------------------------------------------------------------------
TEXT = "@"
PERCENT = "0.00%"
NUMBER = "0"
NUMBER_TWO_DECIMAL_PLACES = "0.00"

# ---------------------------------------------------------------------------
# Dates and times (US long/short date)
# ---------------------------------------------------------------------------
DATE_TIME = "m/d/yyyy h:mm:ss.ms"
DATE = "m/d/yyyy"
TIME = "h:mm:ss.ms"

# Custom: elapsed hours keep counting past 24
DURATION = "[hh]:mm:ss.ms"
