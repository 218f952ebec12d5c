# tally_helper/controllers/voucher_extractor.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tally_helper.controllers.name_classifier import classify_name
from tally_helper.controllers.record_extractor import ColumnMap, RecordExtractor
from tally_helper.data_model.interfaces import LedgerKind, Row
from tally_helper.data_model.ledger import (
    DEFAULT_VOUCHER_LAYOUT,
    Detail,
    Voucher,
    VoucherLayout,
)
from tally_helper.utilities.converters_scalar import (
    Number,
    is_nonzero_number,
    normalize_excel_date,
    to_number,
)
from tally_helper.utilities.core_util import cell_at, cell_text, is_blank_cell

log = logging.getLogger(__name__)


class VoucherExtractor(RecordExtractor[Voucher]):
    """
    Rebuild vouchers from a Tally voucher-register export.

    Layout:
    • rows before the header are the report banner and are ignored; the header is
      `layout.header_row`, or the first of `layout.fallback_header_rows` that
      carries both the Vch Type and Vch No labels;
    • the header row names the columns, matched by case-insensitive substring;
    • a row with both a Vch Type and a Vch No starts a voucher, every other row
      below it is a detail line (staff allocation, ledger account or rounding).
    """

    ledger_kind = LedgerKind.VOUCHERS

    def __init__(self, layout: VoucherLayout = DEFAULT_VOUCHER_LAYOUT) -> None:
        self.layout = layout

    @property
    def data_start(self) -> int:
        return self.layout.data_start

    def header_index(self, rows: Sequence[Row]) -> int:
        lay = self.layout
        for idx in (lay.header_row, *lay.fallback_header_rows):
            header: Row = rows[idx] if 0 <= idx < len(rows) else ()
            if (
                _find_column(header, lay.vch_type_label) is not None
                and _find_column(header, lay.vch_no_label) is not None
            ):
                if idx != lay.header_row:
                    log.debug("Voucher header found at row %d instead of %d", idx, lay.header_row)
                return idx
        return lay.header_row

    def first_data_row(self, rows: Sequence[Row]) -> int:
        return self.header_index(rows) + 1

    def resolve_columns(self, rows: Sequence[Row]) -> ColumnMap:
        idx = self.header_index(rows)
        header: Row = rows[idx] if idx < len(rows) else ()
        lay = self.layout
        columns = {
            "vch_type": _find_column(header, lay.vch_type_label),
            "vch_no": _find_column(header, lay.vch_no_label),
            "date": _find_column(header, lay.date_label),
            "particulars": _find_column(header, lay.particulars_label),
            "debit": _find_column(header, lay.debit_label),
            "credit": _find_column(header, lay.credit_label),
        }
        missing = [name for name, col in columns.items() if col is None]
        if missing:
            log.debug("Voucher header is missing column(s): %s", missing)
        return columns

    def is_record_start(self, row: Row, columns: ColumnMap) -> bool:
        return not is_blank_cell(cell_at(row, columns["vch_type"])) and not is_blank_cell(
            cell_at(row, columns["vch_no"])
        )

    def open_record(self, row: Row, columns: ColumnMap) -> Voucher:
        date_iso, date_serial = normalize_excel_date(cell_at(row, columns["date"]))
        return Voucher(
            voucher_number=cell_text(cell_at(row, columns["vch_no"])),
            date_iso=date_iso,
            date_serial=date_serial,
            party=cell_text(cell_at(row, columns["particulars"])),
            vch_type=cell_text(cell_at(row, columns["vch_type"])),
            debit_amount=_amount(cell_at(row, columns["debit"])),
            credit_amount=_amount(cell_at(row, columns["credit"])),
        )

    def add_detail(self, record: Voucher, row: Row, columns: ColumnMap) -> None:
        amount, dr_cr = self._scan_amount(row)
        if amount is None:
            amount = _amount(cell_at(row, columns["debit"]))
        if amount is None:
            amount = _amount(cell_at(row, columns["credit"]))

        particulars = cell_text(cell_at(row, columns["particulars"]))
        if particulars:
            detail = Detail.for_party(
                classify_name(particulars), particulars, amount=amount, type=dr_cr
            )
        else:
            # no name but an amount: a rounding adjustment line
            detail = Detail(amount=amount, type=dr_cr if amount is not None else None)

        if not detail.is_empty():
            record.details.append(detail)

    def _scan_amount(self, row: Row) -> Tuple[Optional[Number], Optional[str]]:
        """First non-zero number in the row, plus a Dr/Cr token sitting right before it."""
        for i, value in enumerate(row):
            if is_nonzero_number(value):
                prev = cell_text(row[i - 1]) if i > 0 else ""
                return value, prev if prev in self.layout.type_tokens else None
        return None, None


def _find_column(header: Row, label: str) -> Optional[int]:
    needle = label.lower()
    for i, value in enumerate(header):
        if isinstance(value, str) and needle in value.lower():
            return i
    return None


def _amount(value: Any) -> Optional[Number]:
    number = to_number(value)
    return number if number else None


def parse_voucher_rows(rows: Sequence[Row], layout: VoucherLayout = DEFAULT_VOUCHER_LAYOUT) -> List[Voucher]:
    return VoucherExtractor(layout).parse(rows)


def extract_vouchers(rows: Sequence[Row], layout: VoucherLayout = DEFAULT_VOUCHER_LAYOUT) -> List[Dict[str, Any]]:
    """Voucher records of one sheet as plain mappings, ready for ``json.dump``."""
    return VoucherExtractor(layout).extract(rows)
