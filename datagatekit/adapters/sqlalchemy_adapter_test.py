import pytest
from datagatekit.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from datagatekit.exceptions import DatastoreOperationError


@pytest.fixture
def adapter():
    adapter = SQLAlchemyAdapter("sqlite:///:memory:")
    yield adapter
    adapter.close()


def test_replace_and_read_preserve_order_and_columns(adapter):
    rows = [{"z": 1, "a": "x"}, {"m": None}, {"z": 3, "a": "y"}]
    assert adapter.replace("s.t", rows) == 3
    read = adapter.read("s.t")
    assert read == rows
    assert list(read[0].keys()) == ["z", "a"]


def test_replace_swaps_whole_sequence(adapter):
    adapter.replace("s.t", [{"n": i} for i in range(5)])
    adapter.replace("s.t", [{"n": 99}])
    assert adapter.read("s.t") == [{"n": 99}]


def test_tables_listed_in_creation_order(adapter):
    adapter.replace("b.second", [])
    adapter.replace("a.first", [{"n": 1}])
    adapter.replace("b.second", [{"n": 2}])
    assert adapter.list_tables() == ["b.second", "a.first"]


def test_missing_table_reads_empty(adapter):
    assert adapter.read("no.table") == []


def test_unserializable_rows_raise_and_keep_previous_rows(adapter):
    adapter.replace("s.t", [{"n": 1}])
    with pytest.raises(DatastoreOperationError):
        adapter.replace("s.t", [{"n": object()}])
    assert adapter.read("s.t") == [{"n": 1}]


def test_file_backed_store_persists(tmp_path):
    url = f"sqlite:///{tmp_path / 'rows.db'}"
    first = SQLAlchemyAdapter(url)
    first.replace("s.t", [{"n": 1}])
    first.close()

    second = SQLAlchemyAdapter(url)
    assert second.read("s.t") == [{"n": 1}]
    assert second.list_tables() == ["s.t"]
    second.close()
