from __future__ import annotations

from datetime import datetime

from tally_helper.controllers.voucher_extractor import (
    VoucherExtractor,
    extract_vouchers,
    parse_voucher_rows,
)
from tally_helper.data_model.ledger import Voucher, VoucherLayout

# Column order of a Tally "Voucher Register" export
HEADER = ["Date", "Particulars", None, None, "Vch Type", "Vch No.", "Debit", "Credit"]


def _banner(n: int = 9) -> list:
    return [[f"banner line {i}"] for i in range(n)]


def _start(vch_no="1001", date=45000, party="ABC Traders", vch_type="Sales", debit=None, credit=5000):
    return [date, party, None, None, vch_type, vch_no, debit, credit]


def _detail(particulars, *cells):
    row = [None, particulars, *cells]
    return row + [None] * (len(HEADER) - len(row))


def _sheet(*data_rows):
    return _banner() + [HEADER] + list(data_rows)


# --------------------------- start rows -------------------------------------


def test_minimal_sheet_yields_one_voucher_with_two_details():
    """A banner, a header, one voucher start and two detail rows → one voucher."""
    # Arrange
    rows = _sheet(
        _start(),
        _detail("Rahul Sharma", "Cr", 2500),
        _detail("Local Sales A/c", 4237.29),
    )

    # Act
    out = extract_vouchers(rows)

    # Assert
    assert len(out) == 1
    v = out[0]
    assert v["Voucher_Number"] == "1001"
    assert v["Date_iso"] == "2023-03-15"
    assert v["Date_serial"] == 45000
    assert v["Party"] == "ABC Traders"
    assert v["Vch_Type"] == "Sales"
    assert v["Credit_Amount"] == 5000
    assert "Debit_Amount" not in v
    assert len(v["Details"]) == 2


def test_details_are_split_into_staff_and_account_lines():
    rows = _sheet(
        _start(),
        _detail("Rahul Sharma", "Cr", 2500),
        _detail("Local Sales A/c", 4237.29),
        _detail("CGST Output", 381.36),
    )

    details = extract_vouchers(rows)[0]["Details"]

    assert details == [
        {"Staff": "Rahul Sharma", "Type": "Cr", "Amount": 2500},
        {"Account": "Local Sales A/c", "Amount": 4237.29},
        {"Account": "CGST Output", "Amount": 381.36},
    ]


def test_rounding_line_without_particulars_keeps_amount_and_type():
    rows = _sheet(_start(), _detail(None, "Dr", 0.71))

    details = extract_vouchers(rows)[0]["Details"]

    assert details == [{"Amount": 0.71, "Type": "Dr"}]


def test_type_token_must_sit_right_before_the_amount():
    """A Dr/Cr token separated from the amount by another cell is not captured."""
    rows = _sheet(_start(), _detail("Rahul Sharma", "Dr", None, 300))

    details = extract_vouchers(rows)[0]["Details"]

    assert details == [{"Staff": "Rahul Sharma", "Amount": 300}]


def test_amount_falls_back_to_debit_then_credit_columns():
    """Non-numeric amounts in Debit/Credit are parsed leniently as a fallback."""
    # Arrange
    debit_row = [None, "CGST Output", None, None, None, None, "1,200.00", None]
    credit_row = [None, "SGST Output", None, None, None, None, None, "300"]
    rows = _sheet(_start(), debit_row, credit_row)

    # Act
    details = extract_vouchers(rows)[0]["Details"]

    # Assert
    assert details == [
        {"Account": "CGST Output", "Amount": 1200},
        {"Account": "SGST Output", "Amount": 300},
    ]


def test_zero_is_not_an_amount():
    rows = _sheet(_start(), _detail("Local Sales A/c", 0, 0))

    details = extract_vouchers(rows)[0]["Details"]

    assert details == [{"Account": "Local Sales A/c"}]


def test_rows_with_nothing_useful_are_dropped():
    rows = _sheet(_start(), [None] * 8, _detail(None, "Dr"), _detail("", 0))

    assert extract_vouchers(rows)[0]["Details"] == []


# --------------------------- state machine ----------------------------------


def test_orphan_rows_before_first_voucher_are_discarded():
    rows = _sheet(
        _detail("Rahul Sharma", "Cr", 100),
        _start(vch_no="7"),
        _detail("Vikas Gupta", "Dr", 50),
    )

    out = extract_vouchers(rows)

    assert len(out) == 1
    assert out[0]["Details"] == [{"Staff": "Vikas Gupta", "Type": "Dr", "Amount": 50}]


def test_consecutive_start_rows_keep_input_order_and_empty_details():
    rows = _sheet(*[_start(vch_no=str(n)) for n in (3, 1, 2)])

    out = extract_vouchers(rows)

    assert [v["Voucher_Number"] for v in out] == ["3", "1", "2"]
    assert all(v["Details"] == [] for v in out)


def test_last_voucher_is_flushed_at_end_of_input():
    rows = _sheet(_start(vch_no="1"), _detail("Cash", 10), _start(vch_no="2"), _detail("Bank", 20))

    out = extract_vouchers(rows)

    assert [v["Voucher_Number"] for v in out] == ["1", "2"]
    assert out[1]["Details"] == [{"Account": "Bank", "Amount": 20}]


def test_parsing_is_idempotent():
    rows = _sheet(_start(), _detail("Rahul Sharma", "Cr", 2500), _start(vch_no="1002"))
    extractor = VoucherExtractor()

    first = extractor.extract(rows)
    second = extractor.extract(rows)

    assert first == second
    assert first is not second


def test_parse_returns_voucher_dataclasses():
    out = parse_voucher_rows(_sheet(_start()))

    assert [type(v) for v in out] == [Voucher]
    assert out[0].credit_amount == 5000
    assert out[0].details == []


# --------------------------- header / cells ---------------------------------


def test_header_match_is_fuzzy_and_case_insensitive():
    # Arrange: columns shuffled and labelled differently
    header = ["VCH NO.", "vch type", "Particulars (Ledger)", "Txn date", "Credit Amt", "Debit Amt"]
    start = ["55", "Sales", "XYZ Stores", 45001, 900, None]
    rows = _banner() + [header, start]

    # Act
    v = extract_vouchers(rows)[0]

    # Assert
    assert v["Voucher_Number"] == "55"
    assert v["Vch_Type"] == "Sales"
    assert v["Party"] == "XYZ Stores"
    assert v["Date_iso"] == "2023-03-16"
    assert v["Credit_Amount"] == 900


def test_missing_vch_columns_means_no_vouchers():
    rows = _banner() + [["Date", "Particulars", "Debit", "Credit"], [45000, "ABC", 1, 2]]

    assert extract_vouchers(rows) == []


def test_sheet_shorter_than_banner_is_empty():
    assert extract_vouchers(_banner(4)) == []
    assert extract_vouchers([]) == []


def test_ragged_and_odd_cells_do_not_raise():
    rows = _sheet(
        _start(date="not a date", credit="n/a", vch_no=1001.0),
        [None, "Rahul Sharma"],
        [],
        [None, 12345, "Dr", 5],
    )

    v = extract_vouchers(rows)[0]

    assert v["Voucher_Number"] == "1001"
    assert v["Date_iso"] is None
    assert "Date_serial" not in v
    assert "Credit_Amount" not in v
    assert v["Details"] == [
        {"Staff": "Rahul Sharma"},
        {"Account": "12345", "Amount": 12345},
    ]


def test_native_date_cell_is_normalized():
    rows = _sheet(_start(date=datetime(2024, 4, 1)))

    v = extract_vouchers(rows)[0]

    assert v["Date_iso"] == "2024-04-01"
    assert v["Date_serial"] == 45383


def test_custom_layout_moves_the_header_row():
    rows = [HEADER, _start(vch_no="9")]

    out = extract_vouchers(rows, VoucherLayout(header_row=0))

    assert [v["Voucher_Number"] for v in out] == ["9"]


def test_header_after_eight_row_banner_is_found():
    """Register exports with an 8-row banner put the header at row 8."""
    # Arrange
    rows = _banner(8) + [HEADER, _start(), _detail("Rahul Sharma", "Cr", 2500)]

    # Act
    out = extract_vouchers(rows)

    # Assert
    assert len(out) == 1
    assert out[0]["Voucher_Number"] == "1001"
    assert out[0]["Details"] == [{"Staff": "Rahul Sharma", "Type": "Cr", "Amount": 2500}]


def test_row_nine_header_wins_over_row_eight():
    """When both candidate rows carry labels, the configured header row is used."""
    rows = _banner(8) + [HEADER, HEADER, _start(vch_no="5")]

    extractor = VoucherExtractor()

    assert extractor.header_index(rows) == 9
    assert [v["Voucher_Number"] for v in extractor.extract(rows)] == ["5"]
