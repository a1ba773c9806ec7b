import logging

from models.records import FilterCriteria, RecordInput
from services.aggregations import compute_statistics, empty_statistics, filter_positions
from services.errors import SheetError, StoreFailure
from services.record_mapper import record_to_row, row_to_record, rows_to_records, validate_input
from services.row_store import HEADER, RowStore

logger = logging.getLogger(__name__)


def list_records(store: RowStore) -> list[dict]:
    try:
        rows = store.read_all()
    except SheetError:
        raise
    except Exception as exc:
        logger.exception("LIST failed: sheet=%s", store.sheet_name)
        raise StoreFailure("Failed to fetch data") from exc

    logger.info("LIST: sheet=%s rows=%s", store.sheet_name, len(rows))
    return [record.model_dump() for record in rows_to_records(rows)]


def create_record(store: RowStore, payload: RecordInput) -> dict:
    validate_input(payload)

    try:
        last_row = store.count()
        if last_row == 0:
            store.append(HEADER)
            last_row = 1

        row = record_to_row(payload, data_row_count=last_row - 1)
        store.append(row)
    except SheetError:
        raise
    except Exception as exc:
        logger.exception("CREATE failed: sheet=%s", store.sheet_name)
        raise StoreFailure("Failed to add data") from exc

    logger.info(
        "CREATE: sheet=%s order_id=%s project_id=%s",
        store.sheet_name,
        row.order_id,
        row.project_id,
    )
    return {
        "success": True,
        "message": "Data added successfully",
        "orderId": row.order_id,
        "projectId": row.project_id,
    }


def store_statistics(store: RowStore) -> dict:
    try:
        if not store.exists():
            return empty_statistics()
        return compute_statistics(store.read_all())
    except SheetError:
        raise
    except Exception as exc:
        logger.exception("STATS failed: sheet=%s", store.sheet_name)
        raise StoreFailure("Failed to compute statistics") from exc


def filtered_records(store: RowStore, criteria: FilterCriteria) -> list[dict]:
    try:
        if not store.exists():
            return []
        rows = store.read_all()
    except SheetError:
        raise
    except Exception as exc:
        logger.exception("FILTER failed: sheet=%s", store.sheet_name)
        raise StoreFailure("Failed to fetch data") from exc

    positions = filter_positions(rows, criteria)
    return [row_to_record(rows[pos - 1], pos).model_dump() for pos in positions]
