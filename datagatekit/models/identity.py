# datagatekit/models/identity.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Group:
    id: int
    name: str
    description: str = ""


@dataclass
class User:
    """An authenticated caller.

    group_name is denormalized from the group at registration time for display.
    A user without group_id has no schema access.
    """
    id: int
    email: str
    is_active: bool = True
    group_id: Optional[int] = None
    group_name: Optional[str] = None
