import pandas as pd

from models.records import FilterCriteria
from services.record_mapper import (
    DEFAULT_PROJECT_TYPE,
    DEFAULT_REGION,
    parse_price,
    parse_timestamp,
    text_or_default,
)
from services.row_store import Row


def empty_statistics() -> dict:
    return {
        "totalOrders": 0,
        "totalRevenue": 0,
        "avgPrice": 0,
        "projectTypeCounts": {},
        "regionCounts": {},
    }


def _frame(rows) -> pd.DataFrame:
    data = [tuple(row if isinstance(row, Row) else Row.from_cells(row)) for row in rows]
    return pd.DataFrame(data, columns=list(Row._fields), dtype=object)


def _parse_dates(series: pd.Series) -> pd.Series:
    return pd.to_datetime(series.map(parse_timestamp), utc=True)


def _counts(series: pd.Series, default: str) -> dict[str, int]:
    labels = series.map(lambda value: text_or_default(value, default))
    return {str(k): int(v) for k, v in labels.value_counts(sort=False).items()}


def _criteria_mask(frame: pd.DataFrame, criteria: FilterCriteria) -> pd.Series:
    mask = pd.Series(True, index=frame.index)

    if criteria.projectType:
        mask &= frame["project_type"] == criteria.projectType

    if criteria.region:
        mask &= frame["region"] == criteria.region

    # range applies only with both ends; an unparseable bound leaves its side
    # open and an unparseable row date is never rejected
    if criteria.startDate and criteria.endDate:
        start = parse_timestamp(criteria.startDate)
        end = parse_timestamp(criteria.endDate)
        dates = _parse_dates(frame["date"])
        if start is not None:
            mask &= ~(dates < start)
        if end is not None:
            mask &= ~(dates > end)

    return mask


def filter_positions(rows, criteria: FilterCriteria) -> list[int]:
    """1-based positions of the rows matching every criterion that is set."""
    frame = _frame(rows)
    if frame.empty:
        return []
    mask = _criteria_mask(frame, criteria)
    return [int(index) + 1 for index in frame.index[mask.to_numpy(dtype=bool)]]


def filter_records(rows, criteria: FilterCriteria) -> list[Row]:
    frame = _frame(rows)
    if frame.empty:
        return []
    matched = frame[_criteria_mask(frame, criteria).to_numpy(dtype=bool)]
    return [Row(*values) for values in matched.itertuples(index=False, name=None)]


def compute_statistics(rows) -> dict:
    frame = _frame(rows)
    total_orders = len(frame)
    if total_orders == 0:
        return empty_statistics()

    total_revenue = float(frame["price"].map(parse_price).sum())
    return {
        "totalOrders": total_orders,
        "totalRevenue": total_revenue,
        "avgPrice": total_revenue / total_orders,
        "projectTypeCounts": _counts(frame["project_type"], DEFAULT_PROJECT_TYPE),
        "regionCounts": _counts(frame["region"], DEFAULT_REGION),
    }
