# models/sheet_rows.py

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, func
from db.base import Base


class Sheet(Base):
    __tablename__ = "sheets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SheetRow(Base):
    __tablename__ = "sheet_rows"

    id = Column(Integer, primary_key=True, index=True)   # append order
    sheet_id = Column(Integer, ForeignKey("sheets.id"), nullable=False, index=True)
    cells = Column(JSON, nullable=False)                  # raw cell values, positional
