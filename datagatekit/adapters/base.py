# datagatekit/adapters/base.py
from abc import ABC, abstractmethod
from typing import Dict, List
import threading
from datagatekit.models.table_info import Row


class TableLocks:
    """Hands out one exclusive lock per table key."""

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, full_name: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(full_name)
            if lock is None:
                lock = threading.Lock()
                self._locks[full_name] = lock
            return lock


class RowStoreAdapter(ABC):
    def __init__(self):
        self.table_locks = TableLocks()

    @abstractmethod
    def read(self, full_name: str) -> List[Row]:
        """Retrieve every row of a table in insertion order.

        Args:
            full_name: Table key in 'schema.table' form.

        Returns:
            List of row dictionaries; empty if the table does not exist.
        """
        pass

    @abstractmethod
    def replace(self, full_name: str, rows: List[Row]) -> int:
        """Swap the entire row sequence of a table.

        Concurrent replaces on the same key must not interleave, and a reader
        must never observe a partially replaced sequence.

        Args:
            full_name: Table key in 'schema.table' form.
            rows: New rows, stored in the given order.

        Returns:
            Number of rows stored.
        """
        pass

    @abstractmethod
    def list_tables(self) -> List[str]:
        """List all table keys in storage order.

        Returns:
            List of 'schema.table' keys.
        """
        pass

    def close(self):
        """Release backend resources."""
        pass
