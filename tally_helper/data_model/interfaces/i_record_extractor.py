# tally_helper/data_model/interfaces/i_record_extractor.py
"""
Runtime-checkable protocol for row-sequence → record-list extractors.

An extractor turns the decoded rows of one worksheet into the ordered list of
records that sheet describes. Implementations must be:

- **Deterministic:** parsing the same rows twice yields deep-equal output.
- **Order preserving:** records come out in the order their start rows appear.
- **Forgiving:** unexpected-but-readable cells never raise; the affected field is
  left empty and parsing continues with the next row.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, TypeVar, runtime_checkable

from .enum_ledger_kind import LedgerKind

R = TypeVar("R", covariant=True)

Row = Sequence[Any]


@runtime_checkable
class IRecordExtractor(Protocol[R]):
    """
    Attributes
    ----------
    ledger_kind : LedgerKind
        The export layout handled by this implementation, used for dispatch
        by the batch converter.
    """

    ledger_kind: LedgerKind

    def parse(self, rows: Sequence[Row]) -> List[R]:
        """
        Reconstruct records from `rows`.

        Parameters
        ----------
        rows : Sequence[Row]
            Every row of the sheet in input order, banner rows included. Each row
            is a sequence of cells: ``None``, ``str``, ``int``/``float`` or a
            native ``date``/``datetime``.

        Returns
        -------
        List[R]
            Completed records in input order; empty when no start row is found.
        """
        ...
