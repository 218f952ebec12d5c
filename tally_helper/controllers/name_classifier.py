# tally_helper/controllers/name_classifier.py
"""
Heuristic staff-vs-account labelling for ledger "Particulars" text.

Tally exports mix salesperson allocations ("Rahul Sharma Uk", "SHUBHAM (CHD)",
"Naresh (Head)") with ledger accounts ("Local Sales A/c", "CGST Output",
"R.Off") in the same column. There is no directory to look names up in, so the
shape of the text decides. False positives are accepted; the record structure
never depends on this call.
"""

from __future__ import annotations

import re
from typing import Any, Final

from tally_helper.data_model.interfaces import PartyKind


def classify_name(value: Any) -> PartyKind:
    """
    Return ``PartyKind.STAFF`` when `value` looks like a person, else ``ACCOUNT``.

    Rules, first match wins:
      1. a parenthesised short tag such as ``(Chd)`` or ``(K)``       → STAFF
      2. an all-caps word followed by `` (`` e.g. ``SHUBHAM (CHD)``   → STAFF
      3. an account keyword (SALE, OUTPUT, INPUT, GST, R.OFF, ROUND…) → ACCOUNT
      4. two leading title-case words, e.g. ``Rahul Sharma``          → STAFF
      5. anything else                                                 → ACCOUNT

    Non-text values are never staff.
    """
    if not isinstance(value, str):
        return PartyKind.ACCOUNT
    text = value.strip()
    if _PAREN_TAG.search(text) or _UPPER_THEN_PAREN.match(text):
        return PartyKind.STAFF
    if _ACCOUNT_KEYWORDS.search(text):
        return PartyKind.ACCOUNT
    if _TITLE_CASE_PAIR.match(text):
        return PartyKind.STAFF
    return PartyKind.ACCOUNT


def is_staff_name(value: Any) -> bool:
    return classify_name(value) is PartyKind.STAFF


_PAREN_TAG: Final[re.Pattern[str]] = re.compile(r"\([A-Z][a-z]*\)")
_UPPER_THEN_PAREN: Final[re.Pattern[str]] = re.compile(r"^[A-Z]+\s+\(")
_TITLE_CASE_PAIR: Final[re.Pattern[str]] = re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+")
_ACCOUNT_KEYWORDS: Final[re.Pattern[str]] = re.compile(
    r"SALE|OUTPUT|INPUT|GST|CGST|SGST|IGST|R\.OFF|ROUND", re.IGNORECASE
)
