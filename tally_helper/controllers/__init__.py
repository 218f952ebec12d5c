# tally_helper/controllers/__init__.py
from .batch_converter import (
    BatchReport,
    FileResult,
    convert_directory,
    convert_file,
    convert_path,
)
from .credit_note_extractor import (
    CreditNoteExtractor,
    extract_credit_notes,
    parse_credit_note_rows,
)
from .name_classifier import classify_name, is_staff_name
from .record_extractor import RecordExtractor
from .sheet_reader import SheetReadError, read_sheet_rows
from .voucher_extractor import VoucherExtractor, extract_vouchers, parse_voucher_rows

__all__ = [
    "BatchReport",
    "FileResult",
    "convert_directory",
    "convert_file",
    "convert_path",
    "CreditNoteExtractor",
    "extract_credit_notes",
    "parse_credit_note_rows",
    "classify_name",
    "is_staff_name",
    "RecordExtractor",
    "SheetReadError",
    "read_sheet_rows",
    "VoucherExtractor",
    "extract_vouchers",
    "parse_voucher_rows",
]
