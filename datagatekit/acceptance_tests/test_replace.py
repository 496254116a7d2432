# datagatekit/acceptance_tests/test_replace.py
import threading
from datagatekit.enums import PermissionLevel


def _admin(dsl):
    return dsl.group(1, "Admins") \
              .user("admin@example.com", group_id=1) \
              .grant(1, "sales", PermissionLevel.WRITE) \
              .table("sales.orders", [{"order_id": 1, "amount": "10.00"}]) \
              .login_as("admin@example.com")


def test_replace_then_query_round_trip(dsl):
    rows = [{"order_id": 2000 + i, "customer": f"Customer {i}"} for i in range(73)]
    _admin(dsl).replace("sales", "orders", rows) \
               .query("sales", "orders", page=1) \
               .assert_page_has(rows[0:50]) \
               .assert_pagination(row_count=50, total_rows=73, total_pages=2)


def test_replace_accepts_any_shape(dsl):
    rows = [{"a": 1}, {"b": "two", "c": None}]
    _admin(dsl).replace("sales", "orders", rows).query("sales", "orders")
    assert dsl.last_result.rows == rows
    info = dsl.gate.get_table_info(dsl.current_user, "sales", "orders")
    assert (info.row_count, info.column_count) == (2, 1)


def test_replace_with_empty_rows_clears_table(dsl):
    _admin(dsl).replace("sales", "orders", []) \
               .query("sales", "orders") \
               .assert_pagination(row_count=0, total_rows=0, total_pages=0)
    assert dsl.gate.list_tables(dsl.current_user, "sales") == ["orders"]


def test_replace_creates_new_table_in_schema(dsl):
    _admin(dsl).replace("sales", "refunds", [{"id": 1}]) \
               .assert_tables("sales", ["orders", "refunds"])


def test_replace_copies_caller_rows(dsl):
    rows = [{"order_id": 1}]
    _admin(dsl).replace("sales", "orders", rows)
    rows[0]["order_id"] = 999
    dsl.query("sales", "orders").assert_page_has([{"order_id": 1}])


def test_concurrent_replaces_never_interleave(dsl):
    _admin(dsl)
    batches = [[{"batch": b, "n": n} for n in range(40)] for b in range(6)]
    seen_batches = []
    errors = []

    def writer(rows):
        try:
            dsl.gate.replace(dsl.current_user, "sales", "orders", rows)
        except Exception as e:
            errors.append(e)

    def reader():
        try:
            for _ in range(10):
                result = dsl.gate.query(dsl.current_user, "sales", "orders")
                seen_batches.append({row.get("batch") for row in result.rows})
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(rows,)) for rows in batches]
    threads += [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    # Every observed snapshot belongs to exactly one replace (or the original table)
    assert all(len(batch_ids) == 1 for batch_ids in seen_batches)
    final = dsl.gate.query(dsl.current_user, "sales", "orders")
    assert final.total_rows == 40
    assert len({row["batch"] for row in final.rows}) == 1
