from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from buildmarket.guarantees.schemas import BankGuaranteeCreate, BankGuaranteePatch
from buildmarket.tenders.schemas import Tender, TenderCreate, TenderFilters, TenderPatch

from conftest import tender_row


def test_record_serializes_camel_case():
    dumped = Tender.model_validate(tender_row()).model_dump(by_alias=True)
    assert "requiredProfessions" in dumped
    assert "createdAt" in dumped
    assert "required_professions" not in dumped


def test_record_decodes_list_columns():
    tender = Tender.model_validate(tender_row(images="https://cdn.example.com/1.jpg"))
    assert tender.images == ["https://cdn.example.com/1.jpg"]
    assert tender.required_professions == ["каменщик", "электрик"]


def test_input_accepts_camel_and_snake_keys():
    a = TenderCreate.model_validate({"userId": 1, "title": "t", "requiredProfessions": ["x"]})
    b = TenderCreate.model_validate({"user_id": 1, "title": "t", "required_professions": ["x"]})
    assert a == b


def test_input_values_leave_out_unset_optionals():
    values = TenderCreate(user_id=1, title="t").values()
    assert values == {"user_id": 1, "title": "t", "images": [], "required_professions": []}


def test_patch_values_only_contain_supplied_fields():
    assert TenderPatch.model_validate({"status": "closed"}).values() == {"status": "closed"}


def test_patch_discards_server_managed_keys():
    patch = TenderPatch.model_validate(
        {"status": "closed", "updatedAt": "1999-01-01T00:00:00Z", "createdAt": "x", "id": 99}
    )
    assert patch.values() == {"status": "closed"}


def test_patch_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        TenderPatch.model_validate({"status": "closed", "ownerPassword": "x"})


def test_patch_can_null_a_column():
    assert TenderPatch.model_validate({"description": None}).values() == {"description": None}


def test_filters_reject_unknown_keys():
    with pytest.raises(ValidationError):
        TenderFilters.model_validate({"colour": "red"})


def test_guarantee_dates_parsed_from_text():
    g = BankGuaranteeCreate.model_validate(
        {
            "customerId": 1,
            "contractorId": 2,
            "amount": 100000,
            "startDate": "2025-03-01T10:00:00.000Z",
            "endDate": "2025-09-01",
        }
    )
    assert g.start_date == date(2025, 3, 1)
    assert g.end_date == date(2025, 9, 1)


def test_guarantee_dates_from_datetime():
    g = BankGuaranteePatch(start_date=datetime(2025, 3, 1, 23, 0, tzinfo=timezone.utc))
    assert g.start_date == date(2025, 3, 1)


def test_guarantee_period_must_not_be_reversed():
    with pytest.raises(ValidationError):
        BankGuaranteeCreate(customer_id=1, contractor_id=2, amount=1, start_date="2025-09-01", end_date="2025-03-01")
