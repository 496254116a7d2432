# datagatekit/orchestrator.py
from typing import Dict, Iterable, List, Optional
from datagatekit.adapters.base import RowStoreAdapter
from datagatekit.adapters.in_memory_adapter import InMemoryAdapter
from datagatekit.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from datagatekit.catalog import SchemaCatalog
from datagatekit.config import Config, GateSettings
from datagatekit.enums import CredentialMode
from datagatekit.identity.directory import IdentityDirectory
from datagatekit.identity.verifiers import BcryptVerifier, CredentialVerifier, SharedSecretVerifier
from datagatekit.models.identity import Group, User
from datagatekit.models.table_info import Row
from datagatekit.permissions.gate import AccessGate
from datagatekit.permissions.manager import PermissionStore
from datagatekit.permissions.models import SchemaPermission
from datagatekit.query_engine import QueryEngine
from datagatekit import seed
import logging

logger = logging.getLogger(__name__)


class GateOrchestrator:
    """Builds every component once and wires them together by reference.

    Explicit groups/users/grants/tables take precedence over the demo seed.
    """

    def __init__(
        self,
        settings: Optional[GateSettings] = None,
        groups: Optional[Iterable[Group]] = None,
        users: Optional[Iterable[User]] = None,
        grants: Optional[Iterable[SchemaPermission]] = None,
        tables: Optional[Dict[str, List[Row]]] = None,
        row_store: Optional[RowStoreAdapter] = None,
        verifier: Optional[CredentialVerifier] = None,
    ):
        self.settings = settings or GateSettings()
        use_seed = self.settings.seed_demo_data

        if groups is None and use_seed:
            groups = seed.DEMO_GROUPS
        if users is None and use_seed:
            users = [User(**vars(user)) for user in seed.DEMO_USERS]
        if grants is None and use_seed:
            grants = seed.DEMO_PERMISSIONS
        if tables is None and use_seed:
            tables = seed.demo_tables()

        self.row_store = row_store or self._create_adapter(self.settings.row_store_url)
        self._seed_tables(tables or {})

        self.permission_store = PermissionStore(grants)
        self.verifier = verifier or self._create_verifier()
        self.directory = IdentityDirectory(
            groups=groups,
            users=users,
            verifier=self.verifier,
            allow_group_self_assignment=self.settings.allow_group_self_assignment,
        )
        self._enroll_seeded_users()

        self.catalog = SchemaCatalog(self.permission_store, self.row_store)
        self.query_engine = QueryEngine(self.row_store, page_size=Config.PAGE_SIZE)
        self.gate = AccessGate(self.permission_store, self.catalog, self.query_engine, self.row_store)
        logger.info(f"Initialized datagate with row store {type(self.row_store).__name__}")

    def _create_adapter(self, url: str) -> RowStoreAdapter:
        """Create a RowStoreAdapter for the configured URL."""
        if url == Config.IN_MEMORY_URL:
            return InMemoryAdapter()
        return SQLAlchemyAdapter(url)

    def _create_verifier(self) -> CredentialVerifier:
        if self.settings.credential_mode == CredentialMode.BCRYPT:
            return BcryptVerifier()
        return SharedSecretVerifier(self.settings.shared_secret)

    def _seed_tables(self, tables: Dict[str, List[Row]]):
        existing = set(self.row_store.list_tables())
        for full_name, rows in tables.items():
            if full_name in existing:
                logger.info(f"Table {full_name} already present; skipping seed")
                continue
            self.row_store.replace(full_name, rows)

    def _enroll_seeded_users(self):
        # Seeded accounts get the shared secret as their initial per-user credential
        if isinstance(self.verifier, BcryptVerifier):
            for user in self.directory.users():
                self.verifier.enroll(user, self.settings.shared_secret)

    def close(self):
        self.row_store.close()
