# tally_helper/data_model/ledger/detail.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from ..interfaces import IToDict, PartyKind

Number = Union[int, float]


@dataclass
class Detail:
    """One allocation line under a voucher or credit note.

    Only the populated fields are serialized. A named line carries exactly one of
    `staff` / `account`; a rounding line carries just an amount (and maybe a type).
    """

    staff: Optional[str] = None
    account: Optional[str] = None
    type: Optional[str] = None  # "Dr" / "Cr"
    amount: Optional[Number] = None

    @classmethod
    def for_party(
        cls,
        kind: PartyKind,
        name: str,
        *,
        amount: Optional[Number] = None,
        type: Optional[str] = None,
    ) -> "Detail":
        if kind is PartyKind.STAFF:
            return cls(staff=name, type=type, amount=amount)
        return cls(account=name, amount=amount)

    def is_empty(self) -> bool:
        return (
            self.staff is None
            and self.account is None
            and self.type is None
            and self.amount is None
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.staff is not None:
            out[PartyKind.STAFF.value] = self.staff
        if self.account is not None:
            out[PartyKind.ACCOUNT.value] = self.account
        if self.type is not None:
            out["Type"] = self.type
        if self.amount is not None:
            out["Amount"] = self.amount
        return out


if TYPE_CHECKING:
    _is_to_dict: type[IToDict] = Detail
