# datagatekit/acceptance_tests/drivers/gate_driver.py
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.adapters.in_memory_adapter import InMemoryAdapter
from datagatekit.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from datagatekit.config import GateSettings
from datagatekit.models.identity import Group, User
from datagatekit.models.table_info import Row
from datagatekit.orchestrator import GateOrchestrator
from datagatekit.permissions.models import SchemaPermission
import logging

logger = logging.getLogger(__name__)


class GateDriver(ABC):
    """Builds a fully wired orchestrator over a specific row store backend."""

    @abstractmethod
    def create_row_store(self) -> RowStoreAdapter:
        pass

    def build(
        self,
        groups: List[Group],
        users: List[User],
        grants: List[SchemaPermission],
        tables: Optional[Dict[str, List[Row]]] = None,
        settings: Optional[GateSettings] = None,
    ) -> GateOrchestrator:
        settings = settings or GateSettings(seed_demo_data=False)
        orchestrator = GateOrchestrator(
            settings=settings,
            groups=groups,
            users=users,
            grants=grants,
            tables=tables or {},
            row_store=self.create_row_store(),
        )
        logger.info(f"Built orchestrator with {type(self).__name__}")
        return orchestrator


class InMemoryDriver(GateDriver):
    def create_row_store(self) -> RowStoreAdapter:
        return InMemoryAdapter()


class SQLiteDriver(GateDriver):
    def create_row_store(self) -> RowStoreAdapter:
        return SQLAlchemyAdapter("sqlite:///:memory:")
