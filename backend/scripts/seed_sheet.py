import argparse

from db.base import Base
from db.session import SessionLocal, engine
from services.bootstrap import ensure_seeded
from services.deps import SHEET_NAME
from services.row_store import RowStore
from services.workbook import SqlWorkbook


def main():
    parser = argparse.ArgumentParser(description="Create the records sheet and seed sample rows.")
    parser.add_argument("--sheet", default=SHEET_NAME, help=f"sheet name (default: {SHEET_NAME})")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    store = RowStore(SqlWorkbook(SessionLocal), args.sheet)
    summary = ensure_seeded(store)
    print(
        f"Seed complete. sheet={args.sheet} created={summary['created']} "
        f"seeded={summary['seeded']} rows={summary['rows']}"
    )


if __name__ == "__main__":
    main()
