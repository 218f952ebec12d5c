from __future__ import annotations

import json

from tally_helper.data_model.interfaces import IToDict, PartyKind
from tally_helper.data_model.ledger import (
    DEFAULT_CREDIT_NOTE_LAYOUT,
    DEFAULT_VOUCHER_LAYOUT,
    CreditNote,
    CreditNoteMeta,
    Detail,
    Voucher,
)


def test_detail_serializes_only_populated_fields():
    assert Detail(staff="Rahul Sharma", type="Cr", amount=10).to_dict() == {
        "Staff": "Rahul Sharma",
        "Type": "Cr",
        "Amount": 10,
    }
    assert Detail(account="Cash").to_dict() == {"Account": "Cash"}
    assert Detail(amount=0.5).to_dict() == {"Amount": 0.5}
    assert Detail().to_dict() == {}
    assert Detail().is_empty()


def test_detail_for_party_drops_type_on_account_lines():
    staff = Detail.for_party(PartyKind.STAFF, "Vikas Gupta", amount=5, type="Dr")
    account = Detail.for_party(PartyKind.ACCOUNT, "Cash", amount=5, type="Dr")

    assert staff == Detail(staff="Vikas Gupta", type="Dr", amount=5)
    assert account == Detail(account="Cash", amount=5)


def test_voucher_optional_fields_are_absent_not_null():
    v = Voucher(voucher_number="1")

    d = v.to_dict()

    assert d == {
        "Voucher_Number": "1",
        "Date_iso": None,
        "Party": "",
        "Vch_Type": "",
        "Details": [],
    }


def test_credit_note_defaults_and_json_round_trip():
    # Arrange
    note = CreditNote(
        credit_note_number="CN-9",
        date_iso="2023-03-15",
        date_serial=45000,
        party="ABC Traders",
        credit_amount=118,
        details=[Detail(account="Local Sales A/c", amount=-100)],
        meta=CreditNoteMeta(grn_no="12"),
    )

    # Act
    text = json.dumps(note.to_dict())

    # Assert
    back = json.loads(text)
    assert back["Vch_Type"] == "Credit Note"
    assert back["Original_Sales_Voucher_Number"] is None
    assert back["Is_Cancelled"] is False
    assert back["Meta"] == {"Entered_By": None, "GRN_No": "12", "Source": "Tally Export"}
    assert back["Details"] == [{"Account": "Local Sales A/c", "Amount": -100}]


def test_records_satisfy_to_dict_protocol():
    assert isinstance(Voucher("1"), IToDict)
    assert isinstance(CreditNote("1"), IToDict)
    assert isinstance(Detail(), IToDict)


def test_default_layout_offsets():
    assert DEFAULT_VOUCHER_LAYOUT.header_row == 9
    assert DEFAULT_VOUCHER_LAYOUT.data_start == 10
    assert DEFAULT_CREDIT_NOTE_LAYOUT.data_start == 10
    assert DEFAULT_CREDIT_NOTE_LAYOUT.credit_col == 7
