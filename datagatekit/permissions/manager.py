# datagatekit/permissions/manager.py
import logging
from typing import Iterable, List, Optional, Set, Tuple
from datagatekit.enums import PermissionLevel
from datagatekit.permissions.models import SchemaPermission

logger = logging.getLogger(__name__)


class PermissionStore:
    """Holds group -> schema permission grants.

    Grants are provisioned when the store is built; there is no mutation
    operation. If more than one grant exists for the same (group, schema)
    pair, the first one in storage order governs.
    """

    def __init__(self, grants: Optional[Iterable[SchemaPermission]] = None):
        self._grants: Tuple[SchemaPermission, ...] = tuple(grants or ())
        self._warn_duplicates()
        logger.info(f"Initialized permission store with {len(self._grants)} grants")

    def _warn_duplicates(self):
        seen: Set[Tuple[int, str]] = set()
        for grant in self._grants:
            pair = (grant.group_id, grant.schema_name)
            if pair in seen:
                logger.warning(
                    f"Duplicate grant for group {grant.group_id} on schema {grant.schema_name}: "
                    f"{grant.level.value} is shadowed by the earlier grant"
                )
            seen.add(pair)

    def permission_for(self, group_id: Optional[int], schema_name: str) -> Optional[PermissionLevel]:
        """Return the permission level a group holds on a schema, or None."""
        if group_id is None:
            return None
        for grant in self._grants:
            if grant.group_id == group_id and grant.schema_name == schema_name:
                return grant.level
        return None

    def grants_for_group(self, group_id: Optional[int]) -> List[SchemaPermission]:
        """All grants held by a group, in storage order."""
        if group_id is None:
            return []
        return [grant for grant in self._grants if grant.group_id == group_id]

    def all_grants(self) -> List[SchemaPermission]:
        return list(self._grants)
