from enum import Enum


class LedgerKind(Enum):
    """
    The two Tally export layouts the converter understands.
    """
    VOUCHERS = "vouchers"
    CREDIT_NOTES = "credit-notes"
