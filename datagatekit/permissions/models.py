# datagatekit/permissions/models.py
from dataclasses import dataclass
from datagatekit.enums import PermissionLevel


@dataclass(frozen=True)
class SchemaPermission:
    group_id: int
    schema_name: str
    level: PermissionLevel
