# tally_helper/controllers/credit_note_extractor.py
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Final, List, Optional, Sequence, Tuple

from tally_helper.controllers.name_classifier import classify_name
from tally_helper.controllers.record_extractor import ColumnMap, RecordExtractor
from tally_helper.data_model.interfaces import LedgerKind, PartyKind, Row
from tally_helper.data_model.ledger import (
    DEFAULT_CREDIT_NOTE_LAYOUT,
    CreditNote,
    CreditNoteLayout,
    CreditNoteMeta,
    Detail,
)
from tally_helper.utilities.converters_scalar import (
    Number,
    is_nonzero_number,
    is_number,
    normalize_excel_date,
    to_number,
)
from tally_helper.utilities.core_util import cell_at, cell_text, is_blank_cell

log = logging.getLogger(__name__)


class CreditNoteExtractor(RecordExtractor[CreditNote]):
    """
    Rebuild credit notes from a Tally credit-note register export.

    Columns are fixed (see `CreditNoteLayout`); no header row is read. A start row
    has a numeric date, the literal Vch Type "Credit Note" and a Vch No. Rows under
    it are either metadata labels ("GRN No: 123", "Entered By :" + name) or
    allocation lines. Cancelled notes keep their metadata but never any details.

    Sign convention for details (a credit note reverses a sale):
    • staff lines:   Cr → negative, otherwise the amount as exported
    • account lines: Dr → negative, otherwise positive
    """

    ledger_kind = LedgerKind.CREDIT_NOTES

    def __init__(self, layout: CreditNoteLayout = DEFAULT_CREDIT_NOTE_LAYOUT) -> None:
        self.layout = layout

    @property
    def data_start(self) -> int:
        return self.layout.data_start

    def is_record_start(self, row: Row, columns: ColumnMap) -> bool:
        lay = self.layout
        return (
            is_number(cell_at(row, lay.date_col))
            and cell_text(cell_at(row, lay.vch_type_col)) == lay.start_vch_type
            and not is_blank_cell(cell_at(row, lay.vch_no_col))
        )

    def open_record(self, row: Row, columns: ColumnMap) -> CreditNote:
        lay = self.layout
        date_serial = cell_at(row, lay.date_col)
        particulars = cell_text(cell_at(row, lay.particulars_col))
        cancelled = particulars == lay.cancelled_marker

        credit_amount: Number = 0
        if not cancelled:
            credit_amount = to_number(cell_at(row, lay.credit_col)) or 0

        return CreditNote(
            credit_note_number=cell_text(cell_at(row, lay.vch_no_col)),
            date_iso=normalize_excel_date(date_serial).iso,
            date_serial=date_serial,
            party=None if cancelled else particulars,
            is_cancelled=cancelled,
            credit_amount=credit_amount,
            meta=CreditNoteMeta(source=lay.source_tag),
        )

    def add_detail(self, record: CreditNote, row: Row, columns: ColumnMap) -> None:
        lay = self.layout
        particulars = cell_text(cell_at(row, lay.particulars_col))

        grn = _GRN_NO.search(particulars)
        if grn:
            record.meta.grn_no = grn.group(1)
            return
        if _ENTERED_BY.search(particulars):
            # the name sits in the Amount column, whatever column held the label
            entered_by = cell_text(cell_at(row, lay.amount_col))
            if entered_by:
                record.meta.entered_by = entered_by
            return
        if record.is_cancelled or not particulars:
            return

        amount, dr_cr = self._resolve_amount(row)
        if amount is None:
            log.debug(
                "Credit note %s: no amount on detail row %r, skipped",
                record.credit_note_number,
                particulars,
            )
            return

        kind = classify_name(particulars)
        if kind is PartyKind.STAFF:
            signed = -abs(amount) if dr_cr == "Cr" else amount
        else:
            signed = -abs(amount) if dr_cr == "Dr" else abs(amount)
        record.details.append(Detail.for_party(kind, particulars, amount=signed))

    def _resolve_amount(self, row: Row) -> Tuple[Optional[Number], Optional[str]]:
        """Amount+Type columns first, then the Debit ("Dr") and Credit ("Cr") columns."""
        lay = self.layout
        amount = cell_at(row, lay.amount_col)
        if is_nonzero_number(amount):
            return amount, cell_text(cell_at(row, lay.type_col)) or None
        debit = cell_at(row, lay.debit_col)
        if is_nonzero_number(debit):
            return debit, "Dr"
        credit = cell_at(row, lay.credit_col)
        if is_nonzero_number(credit):
            return credit, "Cr"
        return None, None


def parse_credit_note_rows(
    rows: Sequence[Row], layout: CreditNoteLayout = DEFAULT_CREDIT_NOTE_LAYOUT
) -> List[CreditNote]:
    return CreditNoteExtractor(layout).parse(rows)


def extract_credit_notes(
    rows: Sequence[Row], layout: CreditNoteLayout = DEFAULT_CREDIT_NOTE_LAYOUT
) -> List[Dict[str, Any]]:
    """Credit-note records of one sheet as plain mappings, ready for ``json.dump``."""
    return CreditNoteExtractor(layout).extract(rows)


_GRN_NO: Final[re.Pattern[str]] = re.compile(r"GRN\s*No[.:]?\s*(\d+)", re.IGNORECASE)
_ENTERED_BY: Final[re.Pattern[str]] = re.compile(r"Entered\s*By\s*:", re.IGNORECASE)
