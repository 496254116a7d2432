# datagatekit/exceptions.py
from typing import Optional
from datagatekit.enums import FilterRejectReason


class DatagateError(Exception):
    """Base exception for datagate errors."""
    pass


class InvalidCredentialsError(DatagateError):
    """Raised when a login email/credential pair does not match."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class DuplicateEmailError(DatagateError):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email {email} already exists")


class ForbiddenError(DatagateError):
    """Raised when a caller lacks access to a schema.

    The message is the same whether or not the schema exists.
    """

    def __init__(self, schema: str):
        self.schema = schema
        super().__init__(f"Access denied to schema '{schema}'")


class FilterRejectedError(DatagateError):
    """Raised when filter text matches an injection pattern."""

    def __init__(self, reason: FilterRejectReason, pattern: Optional[str] = None):
        self.reason = reason
        self.pattern = pattern
        if reason == FilterRejectReason.COMMENT_PATTERN:
            message = f"SQL Injection attempt detected: comment pattern '{pattern}'"
        else:
            message = "Forbidden SQL keyword detected."
        super().__init__(message)


class NotFoundError(DatagateError):
    """Reserved: catalog and query lookups return zero-valued results instead."""
    pass


class DatastoreOperationError(DatagateError):
    """Raised for general row store operation errors."""
    pass
