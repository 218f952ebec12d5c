# tally_helper/controllers/sheet_reader.py
"""
Workbook → rows.

Loads one worksheet with pandas (openpyxl engine for .xlsx) without treating any
row as a header, and hands back plain Python rows the extractors can fold over.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Union

import numpy as np
import pandas as pd

from tally_helper.utilities.converters_scalar import to_excel_serial
from tally_helper.utilities.core_util import is_blank_cell

log = logging.getLogger(__name__)

Cell = Union[None, str, int, float, date, datetime]


class SheetReadError(ValueError):
    """The workbook could not be opened or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path.name}: {reason}")
        self.path = path


def read_sheet_rows(
    path: Path,
    *,
    sheet: Union[int, str] = 0,
    dates_as_serials: bool = False,
) -> List[List[Cell]]:
    """Read one worksheet as a list of rows of native cell values.

    Parameters
    ----------
    path : Path
        Workbook to read (.xlsx via openpyxl; .xls needs xlrd installed).
    sheet : int | str
        Sheet position or name; the first sheet by default.
    dates_as_serials : bool
        Turn date-formatted cells back into spreadsheet day serials, for layouts
        that expect the raw number in their date column.

    Returns
    -------
    List[List[Cell]]
        Non-blank rows in sheet order. Cells are ``None``, ``str``, ``int``,
        ``float`` or ``datetime``; whole-number floats come back as ``int``.

    Raises
    ------
    SheetReadError
        If the file is missing, not a workbook, or the sheet does not exist.
    """
    path = Path(path)
    try:
        df = pd.read_excel(path, sheet_name=sheet, header=None)
    except Exception as e:
        raise SheetReadError(path, str(e) or type(e).__name__) from e

    rows: List[List[Cell]] = []
    for raw in df.itertuples(index=False, name=None):
        row = [_to_cell(v, dates_as_serials) for v in raw]
        if all(is_blank_cell(v) for v in row):
            continue
        rows.append(row)
    log.debug("Read %d non-blank row(s) from %s", len(rows), path)
    return rows


def _to_cell(value: Any, dates_as_serials: bool) -> Cell:
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, (datetime, date)):
        return to_excel_serial(value) if dates_as_serials else value
    return value
