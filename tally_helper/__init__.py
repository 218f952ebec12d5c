"""
tally_helper: rebuild vouchers and credit notes from Tally ledger exports.
"""

from .controllers import (
    CreditNoteExtractor,
    VoucherExtractor,
    classify_name,
    convert_path,
    extract_credit_notes,
    extract_vouchers,
    read_sheet_rows,
)
from .data_model import LedgerKind, PartyKind
from .utilities import normalize_excel_date

__all__ = [
    "CreditNoteExtractor",
    "VoucherExtractor",
    "classify_name",
    "convert_path",
    "extract_credit_notes",
    "extract_vouchers",
    "read_sheet_rows",
    "LedgerKind",
    "PartyKind",
    "normalize_excel_date",
]

__version__ = "0.1.0"
