# datagatekit/validators.py
import logging
import re
from typing import Optional
from datagatekit.enums import FilterRejectReason
from datagatekit.exceptions import FilterRejectedError

logger = logging.getLogger(__name__)

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_MIN_LENGTH = 8

FORBIDDEN_SQL_KEYWORDS = [
    "DELETE", "UPDATE", "INSERT", "DROP",
    "ALTER", "EXEC", "EXECUTE", "CREATE", "TRUNCATE",
]
SQL_COMMENT_PATTERNS = [";", "--", "/*"]

# ASCII word boundaries: 'dropdown' passes, 'DROP table' does not
_KEYWORD_PATTERNS = [
    (keyword, re.compile(rf"\b{keyword}\b", re.IGNORECASE | re.ASCII))
    for keyword in FORBIDDEN_SQL_KEYWORDS
]


def validate_where_clause(clause: Optional[str]) -> None:
    """Reject filter text carrying superficial SQL injection patterns.

    This is a safety gate only. The filter is never parsed as SQL; it is used
    for plain substring matching by the query engine.

    Args:
        clause: Raw filter text. Empty or None means no filtering.

    Raises:
        FilterRejectedError: With reason COMMENT_PATTERN or FORBIDDEN_KEYWORD.
    """
    if not clause:
        return

    for pattern in SQL_COMMENT_PATTERNS:
        if pattern in clause:
            logger.warning(f"Rejected filter containing comment pattern {pattern!r}")
            raise FilterRejectedError(FilterRejectReason.COMMENT_PATTERN, pattern)

    for keyword, regex in _KEYWORD_PATTERNS:
        if regex.search(clause):
            logger.warning(f"Rejected filter containing forbidden keyword {keyword}")
            raise FilterRejectedError(FilterRejectReason.FORBIDDEN_KEYWORD, keyword)


def validate_email(email: Optional[str]) -> str:
    """Check an email address has a local@domain.tld shape.

    Returns:
        The email unchanged.

    Raises:
        ValueError: If the email is empty or malformed.
    """
    if not email:
        raise ValueError("Email cannot be empty.")
    if not EMAIL_REGEX.match(email):
        raise ValueError("Invalid email format.")
    return email


def validate_password(password: Optional[str]) -> str:
    """Check a password is non-empty and at least PASSWORD_MIN_LENGTH characters.

    Raises:
        ValueError: If the password is empty or too short.
    """
    if not password:
        raise ValueError("Password cannot be empty.")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.")
    return password
