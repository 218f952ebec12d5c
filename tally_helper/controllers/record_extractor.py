# tally_helper/controllers/record_extractor.py
"""
Shared state machine for rebuilding header/detail records out of flat sheet rows.

A Tally ledger export prints each record as one "start" row followed by any
number of detail rows. Reconstruction is a single left fold over the rows with
one optional slot for the record that is currently open:

    banner rows ─▶ (optional) header row ─▶ for each data row:
        start row?   → seal the open record, open a new one
        open record? → let the record absorb the row as a detail
        otherwise    → orphan row, dropped
    end of rows  ─▶ seal the open record

Subclasses only describe *their* layout: where data begins, how to resolve
columns, what a start row looks like, and how a detail row is absorbed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from tally_helper.data_model.interfaces import IToDict, LedgerKind, Row

log = logging.getLogger(__name__)

R = TypeVar("R", bound=IToDict)
ColumnMap = Dict[str, Optional[int]]


class RecordExtractor(ABC, Generic[R]):
    """Template for the two ledger pipelines; see the module docstring."""

    ledger_kind: LedgerKind

    # --- layout hooks ---

    @property
    @abstractmethod
    def data_start(self) -> int:
        """Index of the first row that may hold a record."""

    def first_data_row(self, rows: Sequence[Row]) -> int:
        """Where records may begin in this particular sheet; `data_start` unless overridden."""
        return self.data_start

    def resolve_columns(self, rows: Sequence[Row]) -> ColumnMap:
        """Column positions for this sheet. Fixed layouts ignore `rows`."""
        return {}

    @abstractmethod
    def is_record_start(self, row: Row, columns: ColumnMap) -> bool: ...

    @abstractmethod
    def open_record(self, row: Row, columns: ColumnMap) -> R: ...

    @abstractmethod
    def add_detail(self, record: R, row: Row, columns: ColumnMap) -> None:
        """Fold a non-start row into the open `record` (or ignore it)."""

    # --- driver ---

    def parse(self, rows: Sequence[Row]) -> List[R]:
        """Reconstruct the records of one sheet, in input order."""
        columns = self.resolve_columns(rows)
        records: List[R] = []
        current: Optional[R] = None
        orphans = 0

        for row in rows[self.first_data_row(rows) :]:
            if not row:
                continue
            if self.is_record_start(row, columns):
                if current is not None:
                    records.append(current)
                current = self.open_record(row, columns)
            elif current is not None:
                self.add_detail(current, row, columns)
            else:
                orphans += 1

        if current is not None:
            records.append(current)

        if orphans:
            log.debug("Dropped %d row(s) before the first record start", orphans)
        log.debug("%s: %d record(s) from %d row(s)", self.ledger_kind.value, len(records), len(rows))
        return records

    def extract(self, rows: Sequence[Row]) -> List[Dict[str, Any]]:
        """`parse` and serialize every record to a plain JSON-ready mapping."""
        return [record.to_dict() for record in self.parse(rows)]
