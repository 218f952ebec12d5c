# tally_helper/controllers/batch_converter.py
"""
Batch conversion of Tally exports to JSON documents.

One workbook in, one ``<stem>.json`` out. Every file is converted inside its own
failure boundary: a corrupt or unreadable workbook is logged and reported, and
the rest of the batch carries on.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from tally_helper.controllers.credit_note_extractor import CreditNoteExtractor
from tally_helper.controllers.record_extractor import RecordExtractor
from tally_helper.controllers.sheet_reader import read_sheet_rows
from tally_helper.controllers.voucher_extractor import VoucherExtractor
from tally_helper.data_model.interfaces import LedgerKind
from tally_helper.data_model.ledger import CreditNoteLayout

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KindProfile:
    """How to read and parse one kind of export."""

    make_extractor: Callable[[], RecordExtractor[Any]]
    suffixes: Tuple[str, ...]
    dates_as_serials: bool = False


PROFILES: Dict[LedgerKind, KindProfile] = {
    LedgerKind.VOUCHERS: KindProfile(VoucherExtractor, (".xlsx",)),
    # the credit-note layout keys its start rows on a numeric date column
    LedgerKind.CREDIT_NOTES: KindProfile(
        CreditNoteExtractor, (".xlsx", ".xls"), dates_as_serials=True
    ),
}


@dataclass
class FileResult:
    source: Path
    output: Optional[Path] = None
    record_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    results: List[FileResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[FileResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def make_extractor(
    kind: LedgerKind, *, source_tag: Optional[str] = None
) -> RecordExtractor[Any]:
    if kind is LedgerKind.CREDIT_NOTES and source_tag:
        return CreditNoteExtractor(CreditNoteLayout(source_tag=source_tag))
    return PROFILES[kind].make_extractor()


def output_path_for(source: Path, out_dir: Optional[Path] = None) -> Path:
    target_dir = Path(out_dir) if out_dir is not None else source.parent
    return target_dir / f"{source.stem}.json"


def write_records(records: List[Dict[str, Any]], path: Path) -> None:
    """Write `records` as strict JSON; non-JSON values raise before `path` is touched."""
    text = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
        f.write("\n")


def convert_file(
    path: Path,
    kind: LedgerKind,
    out_dir: Optional[Path] = None,
    *,
    extractor: Optional[RecordExtractor[Any]] = None,
) -> FileResult:
    """Convert a single workbook; never raises, failures land in `FileResult.error`."""
    path = Path(path)
    profile = PROFILES[kind]
    extractor = extractor or profile.make_extractor()
    result = FileResult(source=path)
    try:
        rows = read_sheet_rows(path, dates_as_serials=profile.dates_as_serials)
        records = extractor.extract(rows)
        target = output_path_for(path, out_dir)
        write_records(records, target)
    except Exception as e:
        log.exception("Failed to convert %s", path)
        result.error = str(e) or type(e).__name__
        return result

    result.output = target
    result.record_count = len(records)
    log.info("Converted %s -> %s (%d records)", path.name, target.name, len(records))
    return result


def find_inputs(directory: Path, kind: LedgerKind) -> List[Path]:
    suffixes = PROFILES[kind].suffixes
    return sorted(
        p
        for p in Path(directory).iterdir()
        if p.is_file() and p.suffix.lower() in suffixes and not p.name.startswith("~$")
    )


def convert_directory(
    directory: Path,
    kind: LedgerKind,
    out_dir: Optional[Path] = None,
    *,
    extractor: Optional[RecordExtractor[Any]] = None,
) -> BatchReport:
    """Convert every matching workbook in `directory`, one failure boundary per file."""
    files = find_inputs(directory, kind)
    log.info("Found %d %s file(s) in %s", len(files), kind.value, directory)
    extractor = extractor or PROFILES[kind].make_extractor()
    report = BatchReport()
    for path in files:
        report.results.append(convert_file(path, kind, out_dir, extractor=extractor))
    if report.failed:
        log.warning("%d of %d file(s) failed", len(report.failed), len(report.results))
    return report


def convert_path(
    path: Path,
    kind: LedgerKind,
    out_dir: Optional[Path] = None,
    *,
    source_tag: Optional[str] = None,
) -> BatchReport:
    """File or directory, whichever `path` is."""
    path = Path(path)
    extractor = make_extractor(kind, source_tag=source_tag)
    if path.is_dir():
        return convert_directory(path, kind, out_dir, extractor=extractor)
    return BatchReport([convert_file(path, kind, out_dir, extractor=extractor)])
