import argparse
import json

from db.session import SessionLocal
from services.deps import SHEET_NAME
from services.errors import SheetError
from services.row_store import RowStore
from services.sheet_service import list_records
from services.workbook import SqlWorkbook


def main():
    parser = argparse.ArgumentParser(description="Smoke check: list records from the sheet.")
    parser.add_argument("--sheet", default=SHEET_NAME)
    args = parser.parse_args()

    store = RowStore(SqlWorkbook(SessionLocal), args.sheet)
    try:
        records = list_records(store)
    except SheetError as exc:
        raise SystemExit(f"Sheet check failed: {exc.message}")

    print("Sheet check successful")
    print(json.dumps(records[:5], indent=2))


if __name__ == "__main__":
    main()
