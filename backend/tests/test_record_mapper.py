from datetime import date, datetime

import pytest

from models.records import RecordInput
from services import record_mapper
from services.errors import RecordValidationError
from services.record_mapper import (
    format_id,
    parse_date,
    parse_price,
    record_to_row,
    row_to_record,
    rows_to_records,
)
from services.row_store import Row

FULL_ROW = ["ORD-001", "PRJ-001", "Site", "Development", "NA", 15000, "2024-01-15"]


@pytest.fixture()
def fixed_today(monkeypatch):
    monkeypatch.setattr(record_mapper, "today_iso", lambda: "2030-06-01")
    return "2030-06-01"


def test_full_row_maps_every_column():
    record = row_to_record(FULL_ROW, 1)

    assert record.orderId == "ORD-001"
    assert record.projectId == "PRJ-001"
    assert record.projectName == "Site"
    assert record.projectType == "Development"
    assert record.region == "NA"
    assert record.price == 15000
    assert record.date == "2024-01-15"


@pytest.mark.parametrize("blank", ["", None, "   "])
def test_blank_project_type_defaults_to_other(blank):
    row = ["ORD-001", "PRJ-001", "Site", blank, "NA", 100, "2024-01-15"]
    assert row_to_record(row, 1).projectType == "Other"


def test_blank_name_and_region_use_defaults():
    record = row_to_record(["ORD-001", "PRJ-001", "", "Design", None, 1, "2024-01-15"], 1)
    assert record.projectName == "Unnamed Project"
    assert record.region == "Unknown"


@pytest.mark.parametrize("raw", ["abc", None, "", "nan", "inf", True, [1], 10**400])
def test_unparseable_price_is_zero(raw):
    row = ["ORD-001", "PRJ-001", "Site", "Design", "EU", raw, "2024-01-15"]
    assert row_to_record(row, 1).price == 0


@pytest.mark.parametrize("raw,expected", [("12.5", 12.5), (" 800 ", 800.0), (9500, 9500.0), ("-3", -3.0)])
def test_parse_price_accepts_decimal_text(raw, expected):
    assert parse_price(raw) == expected


def test_missing_ids_are_synthesized_from_position():
    record = row_to_record([None, "", "Site", "Design", "EU", 1, "2024-01-15"], 7)
    assert record.orderId == "ORD-007"
    assert record.projectId == "PRJ-007"


def test_position_wider_than_three_digits_is_not_truncated():
    assert format_id("ORD", 1234) == "ORD-1234"


def test_unparseable_date_falls_back_to_today(fixed_today):
    record = row_to_record(["ORD-001", "PRJ-001", "Site", "Design", "EU", 1, "not a date"], 1)
    assert record.date == fixed_today


def test_missing_date_falls_back_to_today(fixed_today):
    record = row_to_record(["ORD-001", "PRJ-001", "Site"], 1)
    assert record.date == fixed_today
    assert record.price == 0
    assert record.projectType == "Other"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2024-01-15T10:30:00", "2024-01-15"),
        ("2024-02-05T23:30:00-05:00", "2024-02-06"),
        (datetime(2024, 3, 9, 18, 45), "2024-03-09"),
        (date(2024, 3, 9), "2024-03-09"),
    ],
)
def test_dates_are_truncated_to_the_day(raw, expected):
    assert parse_date(raw) == expected


def test_short_row_is_padded():
    row = Row.from_cells(["ORD-001"])
    assert row.order_id == "ORD-001"
    assert row.date is None
    assert len(row) == 7


def test_extra_cells_are_dropped():
    row = Row.from_cells(FULL_ROW + ["extra", "cells"])
    assert row.to_cells() == FULL_ROW


def test_rows_to_records_numbers_rows_from_one():
    records = rows_to_records([[None] * 7, [None] * 7])
    assert [r.orderId for r in records] == ["ORD-001", "ORD-002"]


def test_record_to_row_then_back_keeps_input_values():
    payload = RecordInput(projectName="Mobile App", projectType="Development", region="Europe", price=25000)

    row = record_to_row(payload, data_row_count=5)
    record = row_to_record(row, 6)

    assert record.projectName == payload.projectName
    assert record.projectType == payload.projectType
    assert record.region == payload.region
    assert record.price == payload.price
    assert record.orderId == "ORD-006"
    assert record.projectId == "PRJ-006"


def test_record_to_row_stamps_current_date(fixed_today):
    row = record_to_row(RecordInput(projectName="A", projectType="B", region="C", price=1), 0)
    assert row.date == fixed_today
    assert row.order_id == "ORD-001"


@pytest.mark.parametrize(
    "payload",
    [
        {"projectType": "Design", "region": "EU", "price": 10},
        {"projectName": "", "projectType": "Design", "region": "EU", "price": 10},
        {"projectName": "Logo", "region": "EU", "price": 10},
        {"projectName": "Logo", "projectType": "Design", "price": 10},
        {"projectName": "Logo", "projectType": "Design", "region": "EU"},
        {"projectName": "Logo", "projectType": "Design", "region": "EU", "price": 0},
    ],
)
def test_record_to_row_rejects_missing_fields(payload):
    with pytest.raises(RecordValidationError) as excinfo:
        record_to_row(RecordInput(**payload), 0)
    assert excinfo.value.message == "Missing required fields"
