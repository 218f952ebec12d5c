"""
Interfaces and Enums for the ledger data model.
"""

from .enum_ledger_kind import LedgerKind
from .enum_party_kind import PartyKind
from .i_record_extractor import IRecordExtractor, Row
from .i_to_dict import IToDict

__all__ = [
    "LedgerKind",
    "PartyKind",
    "IRecordExtractor",
    "IToDict",
    "Row",
]
