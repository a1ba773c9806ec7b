import logging

from services.row_store import HEADER, RowStore

logger = logging.getLogger(__name__)

SAMPLE_ROWS = [
    ["ORD-001", "PRJ-001", "E-commerce Website", "Development", "North America", 15000, "2024-01-15"],
    ["ORD-002", "PRJ-002", "Brand Identity Design", "Design", "Europe", 8000, "2024-01-20"],
    ["ORD-003", "PRJ-003", "Digital Marketing Campaign", "Marketing", "Asia Pacific", 12000, "2024-01-25"],
    ["ORD-004", "PRJ-004", "Mobile App Development", "Development", "North America", 25000, "2024-02-01"],
    ["ORD-005", "PRJ-005", "UI/UX Redesign", "Design", "Europe", 9500, "2024-02-05"],
]


def ensure_seeded(store: RowStore) -> dict:
    created = store.create()

    if store.count() > 0:
        logger.info('Sheet "%s" already exists with data', store.sheet_name)
        return {"created": created, "seeded": False, "rows": store.count()}

    store.append(HEADER)
    for row in SAMPLE_ROWS:
        store.append(row)

    rows = store.count()
    logger.info('Sheet "%s" setup completed with sample data (rows=%s)', store.sheet_name, rows)
    return {"created": created, "seeded": True, "rows": rows}
