# tally_helper/cli.py
"""
Command line front end.

    tally-helper vouchers exports/                # every .xlsx in the folder
    tally-helper credit-notes "credit notes/" --out-dir json/
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tally_helper.controllers.batch_converter import convert_path
from tally_helper.data_model.interfaces import LedgerKind
from tally_helper.utilities.config_logging import configure_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tally-helper",
        description="Convert Tally voucher / credit-note exports (.xlsx) to JSON.",
    )
    ap.add_argument("kind", choices=[k.value for k in LedgerKind],
                    help="Which export layout the input files use")
    ap.add_argument("input", type=Path, help="A workbook, or a folder of workbooks")
    ap.add_argument("--out-dir", type=Path, default=None,
                    help="Where to write the .json files (default: next to each input)")
    ap.add_argument("--log-dir", type=Path, default=Path("logs"),
                    help="Folder for the rotating log file (default: ./logs)")
    ap.add_argument("--source-tag", default=None,
                    help="Credit notes only: Meta.Source value (default: 'Tally Export')")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug output on the console")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_dir, verbose=args.verbose)
    log.debug("tally-helper %s %s", args.kind, args.input)

    if not args.input.exists():
        print(f"✗ No such file or folder: {args.input}", file=sys.stderr)
        return 2

    report = convert_path(
        args.input, LedgerKind(args.kind), args.out_dir, source_tag=args.source_tag
    )
    for r in report.results:
        if r.ok:
            print(f"✓ {r.source.name} -> {r.output.name} ({r.record_count} records)")
        else:
            print(f"✗ {r.source.name}: {r.error}", file=sys.stderr)
    print(f"{len(report.succeeded)} converted, {len(report.failed)} failed")
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
