# datagatekit/query_engine.py
import json
import logging
from typing import Any, List, Optional
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.config import Config
from datagatekit.models.table_info import QueryResult, Row, full_table_name

logger = logging.getLogger(__name__)


def value_as_text(value: Any) -> str:
    """Render a field value the way the filter compares it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def row_matches(row: Row, needle: str) -> bool:
    """True if any field, as lower-cased text, contains the lower-cased needle."""
    return any(needle in value_as_text(value).lower() for value in row.values())


def page_count(total_rows: int, page_size: int = Config.PAGE_SIZE) -> int:
    return (total_rows + page_size - 1) // page_size


class QueryEngine:
    """Applies the substring filter and pagination to a table's rows.

    Filter text must already have passed validate_where_clause; it is not
    re-validated here. Matching is a crude whole-row substring search with no
    column targeting or operators.
    """

    def __init__(self, row_store: RowStoreAdapter, page_size: int = Config.PAGE_SIZE):
        self.row_store = row_store
        self.page_size = page_size

    def query(self, schema_name: str, table_name: str, page: int = 1,
              filter_text: Optional[str] = None) -> QueryResult:
        if page < 1:
            raise ValueError(f"Page must be >= 1, got {page}")

        full_name = full_table_name(schema_name, table_name)
        rows: List[Row] = self.row_store.read(full_name)

        if filter_text:
            needle = filter_text.lower()
            rows = [row for row in rows if row_matches(row, needle)]

        total_rows = len(rows)
        start = (page - 1) * self.page_size
        sliced = rows[start:start + self.page_size]
        logger.debug(f"Query on {full_name} page {page}: {len(sliced)} of {total_rows} rows")
        return QueryResult(
            rows=sliced,
            row_count=len(sliced),
            total_rows=total_rows,
            page=page,
            page_size=self.page_size,
            total_pages=page_count(total_rows, self.page_size),
        )
