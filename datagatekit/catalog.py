# datagatekit/catalog.py
from typing import List
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.models.identity import User
from datagatekit.models.table_info import TableInfo, full_table_name
from datagatekit.permissions.manager import PermissionStore


class SchemaCatalog:
    """Enumerates schemas and tables and derives table metadata.

    Only the AccessGate should call this; it does no permission checks of its own.
    """

    def __init__(self, permission_store: PermissionStore, row_store: RowStoreAdapter):
        self.permission_store = permission_store
        self.row_store = row_store

    def accessible_schemas(self, user: User) -> List[str]:
        """Distinct schema names granted to the user's group, sorted ascending."""
        if user.group_id is None:
            return []
        grants = self.permission_store.grants_for_group(user.group_id)
        return sorted({grant.schema_name for grant in grants})

    def tables_in(self, schema_name: str) -> List[str]:
        """Table names under a schema, in storage order."""
        prefix = f"{schema_name}."
        return [key[len(prefix):] for key in self.row_store.list_tables() if key.startswith(prefix)]

    def info_for(self, schema_name: str, table_name: str) -> TableInfo:
        """Metadata for a table; a missing table reports zero rows and columns."""
        rows = self.row_store.read(full_table_name(schema_name, table_name))
        return TableInfo.from_rows(schema_name, table_name, rows)
