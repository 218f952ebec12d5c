from enum import Enum


class PartyKind(Enum):
    """
    Who a detail line is attributed to.

    The values double as the serialized detail keys ("Staff" / "Account").
    """
    STAFF = "Staff"
    ACCOUNT = "Account"
