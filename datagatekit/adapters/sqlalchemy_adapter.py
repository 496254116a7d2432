# datagatekit/adapters/sqlalchemy_adapter.py
from contextlib import contextmanager, nullcontext
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.connection import DatastoreConnection
from datagatekit.exceptions import DatastoreOperationError
from datagatekit.models.row_store_models import Base, StoredTable, StoredRow
from datagatekit.models.table_info import Row
import logging
import threading

logger = logging.getLogger(__name__)


class SQLAlchemyAdapter(RowStoreAdapter):
    """Row store persisted through SQLAlchemy.

    Each table's rows are kept as JSON documents ordered by position. A replace
    deletes and re-inserts the rows in a single transaction while holding the
    table's lock.
    """

    def __init__(self, url: str, connection: Optional[DatastoreConnection] = None):
        super().__init__()
        self.connection = connection or DatastoreConnection(url)
        self.engine = self.connection.get_engine()
        self.Session = self.connection.get_session_factory()
        # SQLite allows a single writer; serialize access across tables too
        self._backend_lock = threading.RLock() if self.engine.dialect.name == "sqlite" else None
        self._initialize_tables()

    def _initialize_tables(self):
        """Create the row store tables if they don't exist."""
        try:
            Base.metadata.create_all(self.engine, tables=[StoredTable.__table__, StoredRow.__table__])
            logger.info(f"Initialized row store tables on {self.engine.url.render_as_string(hide_password=True)}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize row store tables: {e}")
            raise DatastoreOperationError(f"Failed to initialize row store tables: {e}")

    def _serialized(self):
        return self._backend_lock if self._backend_lock is not None else nullcontext()

    @contextmanager
    def get_session(self):
        session = self.Session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def read(self, full_name: str) -> List[Row]:
        query = (
            select(StoredRow.data)
            .join(StoredTable, StoredRow.table_id == StoredTable.id)
            .where(StoredTable.full_name == full_name)
            .order_by(StoredRow.position)
        )
        try:
            with self.table_locks.lock_for(full_name), self._serialized():
                with self.Session() as session:
                    return [dict(data) for data in session.execute(query).scalars()]
        except SQLAlchemyError as e:
            logger.error(f"Read failed for {full_name}: {e}")
            raise DatastoreOperationError(f"Error during read on {full_name}: {e}")

    def replace(self, full_name: str, rows: List[Row]) -> int:
        try:
            with self.table_locks.lock_for(full_name), self._serialized():
                with self.get_session() as session:
                    stored = session.execute(
                        select(StoredTable).where(StoredTable.full_name == full_name)
                    ).scalar_one_or_none()
                    if stored is None:
                        stored = StoredTable(full_name=full_name)
                        session.add(stored)
                        session.flush()
                    session.execute(delete(StoredRow).where(StoredRow.table_id == stored.id))
                    session.add_all(
                        StoredRow(table_id=stored.id, position=position, data=dict(row))
                        for position, row in enumerate(rows)
                    )
            logger.debug(f"Replaced {full_name} with {len(rows)} rows")
            return len(rows)
        except (SQLAlchemyError, TypeError, ValueError) as e:
            logger.error(f"Replace failed for {full_name}: {e}")
            raise DatastoreOperationError(f"Error during replace on {full_name}: {e}")

    def list_tables(self) -> List[str]:
        try:
            with self._serialized():
                with self.Session() as session:
                    return list(session.execute(select(StoredTable.full_name).order_by(StoredTable.id)).scalars())
        except SQLAlchemyError as e:
            logger.error(f"Failed to list tables: {e}")
            raise DatastoreOperationError(f"Failed to list tables: {e}")

    def close(self):
        self.connection.stop()
