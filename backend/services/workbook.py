"""
SQL-backed spreadsheet host.

Exposes the five spreadsheet operations the row store relies on
(get_sheet_by_name, insert_sheet, get_values, append_row, get_last_row)
on top of the ``sheets`` / ``sheet_rows`` tables.
"""
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from models.sheet_rows import Sheet, SheetRow


class SqlSheet:
    def __init__(self, session_factory: sessionmaker, sheet_id: int, name: str):
        self._session_factory = session_factory
        self.sheet_id = sheet_id
        self.name = name

    def get_values(self) -> list[list[Any]]:
        with self._session_factory() as db:
            rows = (
                db.query(SheetRow.cells)
                .filter(SheetRow.sheet_id == self.sheet_id)
                .order_by(SheetRow.id)
                .all()
            )
        return [list(cells or []) for (cells,) in rows]

    def append_row(self, cells: list[Any]) -> None:
        with self._session_factory() as db:
            db.add(SheetRow(sheet_id=self.sheet_id, cells=list(cells)))
            db.commit()

    def get_last_row(self) -> int:
        with self._session_factory() as db:
            count = (
                db.query(func.count(SheetRow.id))
                .filter(SheetRow.sheet_id == self.sheet_id)
                .scalar()
            )
        return int(count or 0)


class SqlWorkbook:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _find(self, db: Session, name: str) -> Sheet | None:
        return db.query(Sheet).filter(Sheet.name == name).first()

    def get_sheet_by_name(self, name: str) -> SqlSheet | None:
        with self._session_factory() as db:
            sheet = self._find(db, name)
            if sheet is None:
                return None
            return SqlSheet(self._session_factory, sheet.id, sheet.name)

    def insert_sheet(self, name: str) -> SqlSheet:
        with self._session_factory() as db:
            sheet = Sheet(name=name)
            db.add(sheet)
            try:
                db.commit()
            except IntegrityError:
                # created concurrently; hand back the existing one
                db.rollback()
                sheet = self._find(db, name)
            return SqlSheet(self._session_factory, sheet.id, sheet.name)
