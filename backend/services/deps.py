import os

from db.session import SessionLocal
from services.row_store import RowStore
from services.workbook import SqlWorkbook

SHEET_NAME = os.getenv("SHEET_NAME", "graph")

# one handle for the life of the process
_store = RowStore(SqlWorkbook(SessionLocal), SHEET_NAME)


def get_store() -> RowStore:
    return _store
