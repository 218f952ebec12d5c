# tally_helper/data_model/ledger/__init__.py
from .credit_note import CreditNote, CreditNoteMeta
from .detail import Detail
from .layouts import (
    DEFAULT_CREDIT_NOTE_LAYOUT,
    DEFAULT_VOUCHER_LAYOUT,
    CreditNoteLayout,
    VoucherLayout,
)
from .voucher import Voucher

__all__ = [
    "CreditNote",
    "CreditNoteMeta",
    "Detail",
    "Voucher",
    "VoucherLayout",
    "CreditNoteLayout",
    "DEFAULT_VOUCHER_LAYOUT",
    "DEFAULT_CREDIT_NOTE_LAYOUT",
]
