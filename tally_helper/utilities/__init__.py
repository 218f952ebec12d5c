from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    EXCEL_EPOCH,
    ExcelDate,
    is_nonzero_number,
    is_number,
    normalize_excel_date,
    to_excel_serial,
    to_number,
)
from .core_util import cell_at, cell_text, is_blank_cell, is_null_or_whitespace

__all__ = [
    "is_null_or_whitespace",
    "is_blank_cell",
    "cell_at",
    "cell_text",
    "EXCEL_EPOCH",
    "ExcelDate",
    "is_number",
    "is_nonzero_number",
    "normalize_excel_date",
    "to_excel_serial",
    "to_number",
    "LOGGING",
    "configure_logging",
]
