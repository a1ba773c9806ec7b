"""
Row <-> record conversion.

Reading never fails: blank or malformed cells fall back to the column
default. Writing validates the create payload and lays the cells out in
sheet column order.
"""
import math
from datetime import date, datetime, timezone
from typing import Any

import pandas as pd

from models.records import Record, RecordInput
from services.errors import RecordValidationError
from services.row_store import Row

DEFAULT_PROJECT_NAME = "Unnamed Project"
DEFAULT_PROJECT_TYPE = "Other"
DEFAULT_REGION = "Unknown"


def is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, (int, float)) and value == 0:
        return True
    return isinstance(value, str) and not value.strip()


def text_or_default(value: Any, default: str) -> str:
    if is_blank(value):
        return default
    return value if isinstance(value, str) else str(value)


def parse_price(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_timestamp(value: Any) -> pd.Timestamp | None:
    """Parse a cell to a UTC timestamp, or None when it is not a date."""
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (datetime, date)):
            parsed = pd.Timestamp(value)
        elif isinstance(value, (int, float)):
            # numeric cells are epoch milliseconds
            parsed = pd.to_datetime(value, unit="ms", errors="coerce")
        else:
            parsed = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None

    if parsed is None or pd.isna(parsed):
        return None
    if parsed.tzinfo is None:
        return parsed.tz_localize("UTC")
    return parsed.tz_convert("UTC")


def parse_date(value: Any) -> str | None:
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    return parsed.date().isoformat()


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def format_id(prefix: str, position: int) -> str:
    return f"{prefix}-{position:03d}"


def row_to_record(row, row_index: int) -> Record:
    """
    Map a data row to a record. ``row_index`` is the 1-based position among
    data rows and seeds the generated ids when the sheet has none.
    """
    if not isinstance(row, Row):
        row = Row.from_cells(row)

    return Record(
        orderId=text_or_default(row.order_id, format_id("ORD", row_index)),
        projectId=text_or_default(row.project_id, format_id("PRJ", row_index)),
        projectName=text_or_default(row.project_name, DEFAULT_PROJECT_NAME),
        projectType=text_or_default(row.project_type, DEFAULT_PROJECT_TYPE),
        region=text_or_default(row.region, DEFAULT_REGION),
        price=parse_price(row.price),
        date=parse_date(row.date) or today_iso(),
    )


def rows_to_records(rows) -> list[Record]:
    return [row_to_record(row, index) for index, row in enumerate(rows, start=1)]


def validate_input(payload: RecordInput) -> None:
    if (
        not payload.projectName
        or not payload.projectType
        or not payload.region
        or not payload.price
    ):
        raise RecordValidationError("Missing required fields")


def record_to_row(payload: RecordInput, data_row_count: int) -> Row:
    """
    Build the row appended for a create request.

    Ids are numbered ``data_row_count + 1``. The number comes from the
    current row count, not a stored counter, so it can repeat if rows are
    ever removed or two creates race.
    """
    validate_input(payload)
    position = data_row_count + 1
    return Row(
        order_id=format_id("ORD", position),
        project_id=format_id("PRJ", position),
        project_name=payload.projectName,
        project_type=payload.projectType,
        region=payload.region,
        price=payload.price,
        date=today_iso(),
    )
