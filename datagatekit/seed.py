# datagatekit/seed.py
"""Demo dataset provisioned when DATAGATE_SEED_DEMO_DATA is enabled."""
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from datagatekit.enums import PermissionLevel
from datagatekit.models.identity import Group, User
from datagatekit.models.table_info import Row
from datagatekit.permissions.models import SchemaPermission

DEMO_GROUPS: List[Group] = [
    Group(id=1, name="Admins", description="Full access"),
    Group(id=2, name="Analysts", description="Read-only access to business data"),
    Group(id=3, name="Viewers", description="Limited read access"),
]

DEMO_USERS: List[User] = [
    User(id=1, email="admin@example.com", is_active=True, group_id=1, group_name="Admins"),
    User(id=2, email="analyst@example.com", is_active=True, group_id=2, group_name="Analysts"),
    User(id=3, email="user@example.com", is_active=True, group_id=3, group_name="Viewers"),
]

DEMO_PERMISSIONS: List[SchemaPermission] = [
    SchemaPermission(group_id=1, schema_name="public", level=PermissionLevel.WRITE),
    SchemaPermission(group_id=1, schema_name="sales", level=PermissionLevel.WRITE),
    SchemaPermission(group_id=1, schema_name="hr", level=PermissionLevel.WRITE),
    SchemaPermission(group_id=2, schema_name="public", level=PermissionLevel.READ),
    SchemaPermission(group_id=2, schema_name="sales", level=PermissionLevel.READ),
    SchemaPermission(group_id=3, schema_name="public", level=PermissionLevel.READ),
]


def demo_tables(reference_time: Optional[datetime] = None) -> Dict[str, List[Row]]:
    """Build the demo tables keyed by 'schema.table'.

    Timestamps count back from reference_time (now, if not given).
    """
    now = reference_time or datetime.now(timezone.utc)
    users_audit = [
        {
            "id": i + 1,
            "action": "LOGIN" if i % 2 == 0 else "LOGOUT",
            "user_email": f"user{i % 10}@example.com",
            "timestamp": (now - timedelta(hours=i)).isoformat(),
            "ip_address": f"192.168.1.{i % 255}",
        }
        for i in range(120)
    ]
    orders = [
        {
            "order_id": 1000 + i,
            "customer": f"Customer {i}",
            "amount": f"{(i * 137.31) % 1000:.2f}",
            "status": "CANCELLED" if i % 5 == 0 else "COMPLETED",
            "date": (now - timedelta(days=i)).date().isoformat(),
        }
        for i in range(85)
    ]
    employees = [
        {"id": 1, "name": "John Doe", "role": "Manager", "salary": 80000},
        {"id": 2, "name": "Jane Smith", "role": "Developer", "salary": 75000},
        {"id": 3, "name": "Bob Johnson", "role": "Designer", "salary": 70000},
    ]
    return {
        "public.users_audit": users_audit,
        "sales.orders": orders,
        "hr.employees": employees,
    }
