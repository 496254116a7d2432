from enum import Enum


class PermissionLevel(Enum):
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"


class FilterRejectReason(Enum):
    COMMENT_PATTERN = "comment_pattern"
    FORBIDDEN_KEYWORD = "forbidden_keyword"


class CredentialMode(Enum):
    SHARED_SECRET = "shared_secret"
    BCRYPT = "bcrypt"


# Permission levels that authorize full-table replace
WRITE_LEVELS = frozenset({PermissionLevel.WRITE, PermissionLevel.ADMIN})
