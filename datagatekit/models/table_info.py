# datagatekit/models/table_info.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

Row = Dict[str, Any]


def full_table_name(schema_name: str, table_name: str) -> str:
    """Build the composite row store key, e.g. 'sales.orders'."""
    return f"{schema_name}.{table_name}"


@dataclass
class TableInfo:
    """Derived metadata for a table; never stored.

    column_count is taken from the first row, which is assumed representative.
    """
    schema_name: str
    table_name: str
    full_name: str
    row_count: int = 0
    column_count: int = 0

    @classmethod
    def from_rows(cls, schema_name: str, table_name: str, rows: List[Row]) -> "TableInfo":
        return cls(
            schema_name=schema_name,
            table_name=table_name,
            full_name=full_table_name(schema_name, table_name),
            row_count=len(rows),
            column_count=len(rows[0]) if rows else 0,
        )


@dataclass
class QueryResult:
    rows: List[Row] = field(default_factory=list)
    row_count: int = 0
    total_rows: int = 0
    page: int = 1
    page_size: int = 50
    total_pages: int = 0
