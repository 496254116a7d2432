# datagatekit/acceptance_tests/dsl/gate_dsl.py
import logging
from typing import Any, Dict, List, Optional
import pandas as pd
import pytest
from datagatekit.enums import FilterRejectReason, PermissionLevel
from datagatekit.exceptions import FilterRejectedError, ForbiddenError
from datagatekit.models.identity import Group, User
from datagatekit.models.table_info import QueryResult, Row
from datagatekit.permissions.models import SchemaPermission
from ..drivers.gate_driver import GateDriver

logger = logging.getLogger(__name__)


class GateDSL:
    """Fluent scenario builder: arrange grants and tables, act as a user, assert."""

    def __init__(self, driver: GateDriver):
        self.driver = driver
        self.groups: List[Group] = []
        self.users: List[User] = []
        self.grants: List[SchemaPermission] = []
        self.tables: Dict[str, List[Row]] = {}
        self.orchestrator = None
        self.current_user: Optional[User] = None
        self.last_result: Optional[QueryResult] = None

    def group(self, group_id: int, name: str):
        self.groups.append(Group(id=group_id, name=name))
        return self

    def user(self, email: str, group_id: Optional[int] = None):
        group = next((g for g in self.groups if g.id == group_id), None)
        self.users.append(User(
            id=len(self.users) + 1,
            email=email,
            group_id=group_id,
            group_name=group.name if group else None,
        ))
        return self

    def grant(self, group_id: int, schema_name: str, level: PermissionLevel):
        self.grants.append(SchemaPermission(group_id, schema_name, level))
        return self

    def table(self, full_name: str, rows: List[Row]):
        self.tables[full_name] = rows
        return self

    def build(self):
        self.orchestrator = self.driver.build(self.groups, self.users, self.grants, self.tables)
        return self

    def login_as(self, email: str, credential: str = "password"):
        if self.orchestrator is None:
            self.build()
        self.current_user = self.orchestrator.directory.login(email, credential)
        return self

    @property
    def gate(self):
        return self.orchestrator.gate

    def query(self, schema_name: str, table_name: str, page: int = 1, filter_text: Optional[str] = None):
        self.last_result = self.gate.query(self.current_user, schema_name, table_name, page, filter_text)
        return self

    def replace(self, schema_name: str, table_name: str, rows: List[Row]):
        self.gate.replace(self.current_user, schema_name, table_name, rows)
        return self

    def assert_schemas(self, expected: List[str]):
        assert self.gate.list_accessible_schemas(self.current_user) == expected
        return self

    def assert_tables(self, schema_name: str, expected: List[str]):
        assert self.gate.list_tables(self.current_user, schema_name) == expected
        return self

    def assert_page_has(self, expected_rows: List[Dict[str, Any]]):
        actual_df = pd.DataFrame(self.last_result.rows)
        expected_df = pd.DataFrame(expected_rows)
        pd.testing.assert_frame_equal(actual_df, expected_df, check_like=True)
        logger.info(f"Assertion passed for page {self.last_result.page}")
        return self

    def assert_pagination(self, row_count: int, total_rows: int, total_pages: int):
        result = self.last_result
        assert (result.row_count, result.total_rows, result.total_pages) == (row_count, total_rows, total_pages)
        return self

    def assert_can_write(self, schema_name: str, expected: bool):
        assert self.gate.can_write(self.current_user, schema_name) is expected
        return self

    def assert_forbidden(self, operation: str, schema_name: str, table_name: str = "t", rows: Optional[List[Row]] = None):
        with pytest.raises(ForbiddenError) as exc_info:
            if operation == "QUERY":
                self.gate.query(self.current_user, schema_name, table_name)
            elif operation == "REPLACE":
                self.gate.replace(self.current_user, schema_name, table_name, rows or [])
            elif operation == "LIST":
                self.gate.list_tables(self.current_user, schema_name)
            elif operation == "INFO":
                self.gate.get_table_info(self.current_user, schema_name, table_name)
            else:
                raise ValueError(f"Unknown operation: {operation}")
        assert exc_info.value.schema == schema_name
        return self

    def assert_filter_rejected(self, schema_name: str, table_name: str, filter_text: str,
                               reason: FilterRejectReason):
        with pytest.raises(FilterRejectedError) as exc_info:
            self.gate.query(self.current_user, schema_name, table_name, 1, filter_text)
        assert exc_info.value.reason == reason
        return self
