from datetime import datetime
from datagatekit import seed
from datagatekit.adapters.in_memory_adapter import InMemoryAdapter
from datagatekit.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from datagatekit.config import GateSettings
from datagatekit.orchestrator import GateOrchestrator


def test_demo_seed_is_provisioned():
    orchestrator = GateOrchestrator(GateSettings())
    assert isinstance(orchestrator.row_store, InMemoryAdapter)
    assert orchestrator.row_store.list_tables() == ["public.users_audit", "sales.orders", "hr.employees"]
    assert [user.email for user in orchestrator.directory.users()] == [
        "admin@example.com", "analyst@example.com", "user@example.com",
    ]
    assert len(orchestrator.permission_store.all_grants()) == 6


def test_seed_disabled_starts_empty():
    orchestrator = GateOrchestrator(GateSettings(seed_demo_data=False))
    assert orchestrator.row_store.list_tables() == []
    assert orchestrator.directory.users() == []
    assert orchestrator.directory.groups() == []


def test_sqlalchemy_url_selects_durable_store_and_keeps_existing_tables(tmp_path):
    url = f"sqlite:///{tmp_path / 'gate.db'}"
    first = GateOrchestrator(GateSettings(row_store_url=url))
    assert isinstance(first.row_store, SQLAlchemyAdapter)
    admin = first.directory.login("admin@example.com", "password")
    first.gate.replace(admin, "hr", "employees", [{"id": 9}])
    first.close()

    second = GateOrchestrator(GateSettings(row_store_url=url))
    admin = second.directory.login("admin@example.com", "password")
    assert second.gate.query(admin, "hr", "employees").rows == [{"id": 9}]
    second.close()


def test_demo_tables_shape():
    tables = seed.demo_tables(reference_time=datetime(2024, 1, 1, 12, 0))
    assert {name: len(rows) for name, rows in tables.items()} == {
        "public.users_audit": 120, "sales.orders": 85, "hr.employees": 3,
    }
    assert tables["public.users_audit"][1]["timestamp"] == "2024-01-01T11:00:00"
    assert tables["sales.orders"][0]["status"] == "CANCELLED"


def test_demo_timestamps_default_to_utc():
    rows = seed.demo_tables()["public.users_audit"]
    assert rows[0]["timestamp"].endswith("+00:00")
