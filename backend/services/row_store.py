import logging
from typing import Any, NamedTuple

from services.errors import StoreNotFound

logger = logging.getLogger(__name__)

HEADER = [
    "Order ID",
    "Project ID",
    "Project Name",
    "Project Type",
    "Region",
    "Price",
    "Date",
]


class Row(NamedTuple):
    order_id: Any = None
    project_id: Any = None
    project_name: Any = None
    project_type: Any = None
    region: Any = None
    price: Any = None
    date: Any = None

    @classmethod
    def from_cells(cls, cells) -> "Row":
        """Fit a raw cell array to the fixed column layout."""
        values = list(cells or [])[: len(cls._fields)]
        values += [None] * (len(cls._fields) - len(values))
        return cls(*values)

    def to_cells(self) -> list[Any]:
        return list(self)


class RowStore:
    """
    Named sheet inside a workbook, viewed as header + positional data rows.
    """

    def __init__(self, workbook, sheet_name: str):
        self.workbook = workbook
        self.sheet_name = sheet_name

    def _sheet(self):
        sheet = self.workbook.get_sheet_by_name(self.sheet_name)
        if sheet is None:
            raise StoreNotFound(
                f'Sheet "{self.sheet_name}" not found. '
                f'Please create a sheet named "{self.sheet_name}" with the required columns.'
            )
        return sheet

    def exists(self) -> bool:
        return self.workbook.get_sheet_by_name(self.sheet_name) is not None

    def create(self) -> bool:
        """Create the sheet if absent. Returns True when it was created."""
        if self.exists():
            return False
        self.workbook.insert_sheet(self.sheet_name)
        logger.info('Created new sheet named "%s"', self.sheet_name)
        return True

    def read_values(self) -> list[list[Any]]:
        return self._sheet().get_values()

    def read_all(self) -> list[Row]:
        """Data rows (header skipped) in append order."""
        values = self.read_values()
        return [Row.from_cells(cells) for cells in values[1:]]

    def count(self) -> int:
        return self._sheet().get_last_row()

    def append(self, row) -> None:
        cells = row.to_cells() if isinstance(row, Row) else list(row)
        self._sheet().append_row(cells)
