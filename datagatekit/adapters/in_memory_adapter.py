# datagatekit/adapters/in_memory_adapter.py
from typing import Dict, List, Optional
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.exceptions import DatastoreOperationError
from datagatekit.models.table_info import Row
import copy
import logging
import threading

logger = logging.getLogger(__name__)


class InMemoryAdapter(RowStoreAdapter):
    def __init__(self, tables: Optional[Dict[str, List[Row]]] = None):
        super().__init__()
        self._keys_lock = threading.Lock()
        self.data: Dict[str, List[Row]] = {}  # {full_name: List[Row]}
        for full_name, rows in (tables or {}).items():
            self.data[full_name] = copy.deepcopy(list(rows))

    def read(self, full_name: str) -> List[Row]:
        with self.table_locks.lock_for(full_name):
            # Stored lists are never mutated in place, only swapped
            snapshot = self.data.get(full_name)
        if snapshot is None:
            return []
        try:
            return copy.deepcopy(snapshot)
        except Exception as e:
            logger.error(f"Read failed for {full_name}: {e}")
            raise DatastoreOperationError(f"Error during read on {full_name}: {e}")

    def replace(self, full_name: str, rows: List[Row]) -> int:
        try:
            new_rows = copy.deepcopy(list(rows))
        except Exception as e:
            logger.error(f"Replace failed for {full_name}: {e}")
            raise DatastoreOperationError(f"Error during replace on {full_name}: {e}")
        with self.table_locks.lock_for(full_name), self._keys_lock:
            self.data[full_name] = new_rows
        logger.debug(f"Replaced {full_name} with {len(new_rows)} rows")
        return len(new_rows)

    def list_tables(self) -> List[str]:
        with self._keys_lock:
            return list(self.data.keys())
