# /app/services/view_helpers/table_fetch.py

import asyncio
import logging
from typing import List

from ...models.record_model import SheetRecord, TableSchema
from .row_mapping import map_rows

logger = logging.getLogger(__name__)


async def fetch_tables(store, *schemas: TableSchema) -> List[List[SheetRecord]]:
    """
    Fetches every requested table concurrently and maps their rows.

    The blocking Sheets calls run in worker threads. Nothing is returned until
    all of them have finished, and the first failure is raised.
    """
    raw_tables = await asyncio.gather(
        *(asyncio.to_thread(store.get_rows, schema.sheet, schema.columns) for schema in schemas)
    )
    tables = []
    for schema, rows in zip(schemas, raw_tables):
        records = map_rows(rows or [], schema.record)
        logger.debug("Fetched %s!%s: %d records", schema.sheet, schema.columns, len(records))
        tables.append(records)
    return tables
