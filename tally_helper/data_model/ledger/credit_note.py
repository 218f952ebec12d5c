# tally_helper/data_model/ledger/credit_note.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .detail import Detail

Number = Union[int, float]

CREDIT_NOTE_VCH_TYPE = "Credit Note"
DEFAULT_SOURCE_TAG = "Tally Export"


@dataclass
class CreditNoteMeta:
    """Free-form metadata picked up from the label rows under a credit note."""

    entered_by: Optional[str] = None
    grn_no: Optional[str] = None
    source: str = DEFAULT_SOURCE_TAG

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Entered_By": self.entered_by,
            "GRN_No": self.grn_no,
            "Source": self.source,
        }


@dataclass
class CreditNote:
    """
    A credit note (sales reversal) reconstructed from a ledger export.

    Cancelled notes carry no party, no details and a zero credit amount.
    `original_sales_voucher_number` is never filled by the parser; a later
    enrichment step links notes to the voucher they reverse.
    """

    credit_note_number: str
    date_iso: Optional[str] = None
    date_serial: Optional[Number] = None
    party: Optional[str] = None
    is_cancelled: bool = False
    credit_amount: Number = 0
    details: List[Detail] = field(default_factory=list)
    meta: CreditNoteMeta = field(default_factory=CreditNoteMeta)
    original_sales_voucher_number: Optional[str] = None
    vch_type: str = CREDIT_NOTE_VCH_TYPE

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "Credit_Note_Number": self.credit_note_number,
            "Original_Sales_Voucher_Number": self.original_sales_voucher_number,
            "Date_iso": self.date_iso,
        }
        if self.date_serial is not None:
            out["Date_serial"] = self.date_serial
        out.update(
            {
                "Party": self.party,
                "Vch_Type": self.vch_type,
                "Is_Cancelled": self.is_cancelled,
                "Credit_Amount": self.credit_amount,
                "Details": [d.to_dict() for d in self.details],
                "Meta": self.meta.to_dict(),
            }
        )
        return out
