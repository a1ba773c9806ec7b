# routers/records.py

from fastapi import APIRouter, Depends, Query, Response

from models.records import (
    CreateRecordResponse,
    ErrorResponse,
    FilterCriteria,
    Record,
    RecordInput,
    SeedSummary,
    Statistics,
)
from services.bootstrap import ensure_seeded
from services.deps import get_store
from services.row_store import RowStore
from services.sheet_service import (
    create_record,
    filtered_records,
    list_records,
    store_statistics,
)

router = APIRouter(tags=["records"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/", response_model=list[Record], responses=_ERRORS)
def get_records(store: RowStore = Depends(get_store)):
    return list_records(store)


@router.post("/", response_model=CreateRecordResponse, responses=_ERRORS)
def post_record(payload: RecordInput, store: RowStore = Depends(get_store)):
    return create_record(store, payload)


@router.options("/")
def preflight_root():
    return Response(status_code=200)


@router.get("/stats", response_model=Statistics, responses={500: {"model": ErrorResponse}})
def get_statistics(store: RowStore = Depends(get_store)):
    return store_statistics(store)


@router.get("/filter", response_model=list[Record], responses={500: {"model": ErrorResponse}})
def get_filtered_records(
    project_type: str | None = Query(None, alias="projectType"),
    region: str | None = Query(None),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    store: RowStore = Depends(get_store),
):
    criteria = FilterCriteria(
        projectType=project_type,
        region=region,
        startDate=start_date,
        endDate=end_date,
    )
    return filtered_records(store, criteria)


@router.post("/setup", response_model=SeedSummary)
def setup_sheet(store: RowStore = Depends(get_store)):
    return ensure_seeded(store)
