"""Write collections of objects to structured, formatted Excel tables."""
from .columns import TableSheetColumn
from .exceptions import (
    AccessorInvocationError,
    EmptyTableError,
    FailedToGetTableValueError,
    InvalidStartRowError,
    TableSheetError,
)
from .excel import ExcelWriter, formats
from .frames import DataFrameTableSheet
from .sheet import TableSheet

__version__ = "0.1.0"
