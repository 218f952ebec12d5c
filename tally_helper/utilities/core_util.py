#!/usr/bin/env python3
"""
Core Utilities

Features:
- Blank/whitespace checks for cell values
- Safe positional access into ragged spreadsheet rows
- Cell-to-text rendering that keeps spreadsheet numbers readable
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional, Sequence

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def is_blank_cell(value: Any) -> bool:
    """True for empty cells: ``None``, NaN, or text that is only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return is_null_or_whitespace(value)
    if isinstance(value, float):
        return math.isnan(value)
    return False


def cell_at(row: Sequence[Any], index: Optional[int]) -> Any:
    """Return ``row[index]`` or ``None`` when the column is unknown or the row is short.

    Negative indices never wrap around; an unresolved column is ``None`` or ``-1``.
    """
    if index is None or index < 0 or index >= len(row):
        return None
    return row[index]


def cell_text(value: Any) -> str:
    """
    Render a cell as trimmed text.

    Empty cells become ``""``; integral floats drop the ``.0`` that spreadsheets
    add to whole numbers (``1001.0`` -> ``"1001"``); dates render as ISO.
    """
    if is_blank_cell(value):
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


# endregion Common functions
