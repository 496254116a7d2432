# datagatekit/permissions/gate.py
import logging
from typing import List, Optional
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.catalog import SchemaCatalog
from datagatekit.enums import WRITE_LEVELS
from datagatekit.exceptions import ForbiddenError
from datagatekit.models.identity import User
from datagatekit.models.table_info import QueryResult, Row, TableInfo, full_table_name
from datagatekit.permissions.manager import PermissionStore
from datagatekit.query_engine import QueryEngine
from datagatekit.validators import validate_where_clause

logger = logging.getLogger(__name__)


class AccessGate:
    """The authorization boundary for every data operation.

    Reads require any grant on the schema; replace requires WRITE or ADMIN.
    Denials raise ForbiddenError with the same message whether or not the
    schema exists.
    """

    def __init__(self, permission_store: PermissionStore, catalog: SchemaCatalog,
                 query_engine: QueryEngine, row_store: RowStoreAdapter):
        self.permission_store = permission_store
        self.catalog = catalog
        self.query_engine = query_engine
        self.row_store = row_store

    def can_read(self, user: User, schema_name: str) -> bool:
        return schema_name in self.catalog.accessible_schemas(user)

    def can_write(self, user: User, schema_name: str) -> bool:
        level = self.permission_store.permission_for(user.group_id, schema_name)
        return level in WRITE_LEVELS

    def _require_read(self, user: User, schema_name: str):
        if not self.can_read(user, schema_name):
            logger.warning(f"No read access for {user.email} on schema {schema_name}")
            raise ForbiddenError(schema_name)

    def _require_write(self, user: User, schema_name: str):
        if not self.can_write(user, schema_name):
            logger.warning(f"No write access for {user.email} on schema {schema_name}")
            raise ForbiddenError(schema_name)

    def list_accessible_schemas(self, user: User) -> List[str]:
        return self.catalog.accessible_schemas(user)

    def list_tables(self, user: User, schema_name: str) -> List[str]:
        self._require_read(user, schema_name)
        return self.catalog.tables_in(schema_name)

    def get_table_info(self, user: User, schema_name: str, table_name: str) -> TableInfo:
        self._require_read(user, schema_name)
        return self.catalog.info_for(schema_name, table_name)

    def query(self, user: User, schema_name: str, table_name: str, page: int = 1,
              filter_text: Optional[str] = None) -> QueryResult:
        """Read one page of a table, optionally filtered.

        Raises:
            ForbiddenError: If the user cannot read the schema.
            FilterRejectedError: If the filter text fails validation.
            ValueError: If page is below 1.
        """
        self._require_read(user, schema_name)
        validate_where_clause(filter_text)
        return self.query_engine.query(schema_name, table_name, page, filter_text)

    def replace(self, user: User, schema_name: str, table_name: str, rows: List[Row]) -> None:
        """Atomically swap a table's rows. Rows are not checked against the previous shape."""
        self._require_write(user, schema_name)
        full_name = full_table_name(schema_name, table_name)
        count = self.row_store.replace(full_name, rows)
        logger.info(f"{user.email} replaced {full_name} with {count} rows")
