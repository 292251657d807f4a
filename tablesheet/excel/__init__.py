"""Excel formats, styling, cell helpers, and the workbook writer."""
from . import formats
from .formatters import add_cell_comment, auto_fit_column, set_column_format, table_display_name
from .writer import ExcelWriter
