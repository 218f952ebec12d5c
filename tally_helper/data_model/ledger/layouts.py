# tally_helper/data_model/ledger/layouts.py
"""
Fixed sheet layouts of the two Tally exports.

Row and column positions are 0-based and count non-blank rows only, the same
way the sheet reader hands them over.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .credit_note import CREDIT_NOTE_VCH_TYPE, DEFAULT_SOURCE_TAG


@dataclass(frozen=True)
class VoucherLayout:
    # rows 0..header_row-1 are the report banner
    header_row: int = 9
    # tried in order when header_row lacks the Vch Type / Vch No labels;
    # the register export prints an 8-row banner
    fallback_header_rows: Tuple[int, ...] = (8,)
    vch_type_label: str = "Vch Type"
    vch_no_label: str = "Vch No"
    date_label: str = "Date"
    particulars_label: str = "Particulars"
    debit_label: str = "Debit"
    credit_label: str = "Credit"
    type_tokens: Tuple[str, ...] = ("Dr", "Cr")

    @property
    def data_start(self) -> int:
        return self.header_row + 1


@dataclass(frozen=True)
class CreditNoteLayout:
    data_start: int = 10
    date_col: int = 0
    particulars_col: int = 1
    amount_col: int = 2
    type_col: int = 3
    vch_type_col: int = 4
    vch_no_col: int = 5
    debit_col: int = 6
    credit_col: int = 7
    start_vch_type: str = CREDIT_NOTE_VCH_TYPE
    cancelled_marker: str = "(cancelled)"
    source_tag: str = DEFAULT_SOURCE_TAG


DEFAULT_VOUCHER_LAYOUT = VoucherLayout()
DEFAULT_CREDIT_NOTE_LAYOUT = CreditNoteLayout()
