# tally_helper/data_model/__init__.py
from .interfaces import (
    IRecordExtractor, IToDict, LedgerKind, PartyKind, Row)
from .ledger import (
    DEFAULT_CREDIT_NOTE_LAYOUT, DEFAULT_VOUCHER_LAYOUT, CreditNote,
    CreditNoteLayout, CreditNoteMeta, Detail, Voucher, VoucherLayout)
__all__ = [
    "IRecordExtractor", "IToDict", "LedgerKind", "PartyKind", "Row",
    "CreditNote", "CreditNoteMeta", "CreditNoteLayout", "Detail", "Voucher",
    "VoucherLayout", "DEFAULT_VOUCHER_LAYOUT", "DEFAULT_CREDIT_NOTE_LAYOUT"]
