# tally_helper/data_model/ledger/voucher.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .detail import Detail

Number = Union[int, float]


@dataclass
class Voucher:
    """
    A sales/journal voucher reconstructed from a ledger export.

    Identity is (voucher_number, position in file); duplicates are kept as-is and
    left for whoever persists the records.
    """

    voucher_number: str
    date_iso: Optional[str] = None
    date_serial: Optional[Number] = None
    party: str = ""
    vch_type: str = ""
    debit_amount: Optional[Number] = None
    credit_amount: Optional[Number] = None
    details: List[Detail] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "Voucher_Number": self.voucher_number,
            "Date_iso": self.date_iso,
        }
        if self.date_serial is not None:
            out["Date_serial"] = self.date_serial
        out["Party"] = self.party
        out["Vch_Type"] = self.vch_type
        if self.debit_amount is not None:
            out["Debit_Amount"] = self.debit_amount
        if self.credit_amount is not None:
            out["Credit_Amount"] = self.credit_amount
        out["Details"] = [d.to_dict() for d in self.details]
        return out
