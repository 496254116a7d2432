# datagatekit/acceptance_tests/test_permissions.py
from datagatekit.enums import PermissionLevel

ORDERS = [{"order_id": 1000 + i, "status": "COMPLETED"} for i in range(3)]


def test_read_only_group_sees_schema_but_cannot_replace(dsl):
    """Analysts hold READ on sales only."""
    dsl.group(2, "Analysts") \
       .user("analyst@example.com", group_id=2) \
       .grant(2, "sales", PermissionLevel.READ) \
       .table("sales.orders", ORDERS) \
       .login_as("analyst@example.com") \
       .assert_schemas(["sales"]) \
       .assert_tables("sales", ["orders"]) \
       .assert_can_write("sales", False) \
       .assert_forbidden("REPLACE", "sales", "orders", rows=[{"order_id": 1}])

    dsl.query("sales", "orders").assert_page_has(ORDERS)


def test_write_and_admin_levels_allow_replace(dsl):
    dsl.group(1, "Admins") \
       .user("admin@example.com", group_id=1) \
       .grant(1, "hr", PermissionLevel.WRITE) \
       .grant(1, "ops", PermissionLevel.ADMIN) \
       .login_as("admin@example.com") \
       .assert_can_write("hr", True) \
       .assert_can_write("ops", True) \
       .replace("ops", "jobs", [{"id": 1}]) \
       .query("ops", "jobs") \
       .assert_page_has([{"id": 1}])


def test_missing_grant_fails_closed(dsl):
    dsl.group(3, "Viewers") \
       .user("user@example.com", group_id=3) \
       .grant(3, "public", PermissionLevel.READ) \
       .table("hr.employees", [{"id": 1, "name": "John Doe"}]) \
       .login_as("user@example.com") \
       .assert_can_write("hr", False) \
       .assert_forbidden("QUERY", "hr", "employees") \
       .assert_forbidden("LIST", "hr") \
       .assert_forbidden("INFO", "hr", "employees") \
       .assert_forbidden("REPLACE", "hr", "employees")

    assert dsl.gate.can_read(dsl.current_user, "hr") is False


def test_forbidden_reads_the_same_for_missing_schema(dsl):
    dsl.group(3, "Viewers") \
       .user("user@example.com", group_id=3) \
       .grant(3, "public", PermissionLevel.READ) \
       .table("hr.employees", [{"id": 1}]) \
       .login_as("user@example.com")

    messages = []
    for schema_name in ("hr", "does_not_exist"):
        try:
            dsl.gate.list_tables(dsl.current_user, schema_name)
        except Exception as e:
            messages.append(str(e).replace(schema_name, "<schema>"))
    assert messages[0] == messages[1]


def test_user_without_group_has_no_access(dsl):
    dsl.group(1, "Admins") \
       .user("nogroup@example.com") \
       .grant(1, "public", PermissionLevel.WRITE) \
       .login_as("nogroup@example.com") \
       .assert_schemas([]) \
       .assert_can_write("public", False) \
       .assert_forbidden("QUERY", "public", "users_audit")


def test_schemas_are_sorted_and_distinct(dsl):
    dsl.group(1, "Admins") \
       .user("admin@example.com", group_id=1) \
       .grant(1, "sales", PermissionLevel.READ) \
       .grant(1, "hr", PermissionLevel.WRITE) \
       .grant(1, "sales", PermissionLevel.WRITE) \
       .grant(1, "public", PermissionLevel.ADMIN) \
       .login_as("admin@example.com") \
       .assert_schemas(["hr", "public", "sales"])


def test_first_duplicate_grant_governs(dsl):
    dsl.group(1, "Admins") \
       .user("admin@example.com", group_id=1) \
       .grant(1, "sales", PermissionLevel.READ) \
       .grant(1, "sales", PermissionLevel.WRITE) \
       .login_as("admin@example.com") \
       .assert_can_write("sales", False)
