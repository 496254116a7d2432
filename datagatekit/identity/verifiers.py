# datagatekit/identity/verifiers.py
from abc import ABC, abstractmethod
from typing import Dict, Optional
import logging
import threading
import bcrypt
from datagatekit.models.identity import User

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


class CredentialVerifier(ABC):
    @abstractmethod
    def verify(self, user: User, credential: str) -> bool:
        """Check a credential presented for a known user."""
        pass

    def enroll(self, user: User, credential: str) -> None:
        """Store a credential for a newly registered user. No-op by default."""
        pass


class SharedSecretVerifier(CredentialVerifier):
    """Accepts one placeholder secret for every user.

    Demo only: replace with BcryptVerifier (or another per-user check) in production.
    """

    def __init__(self, secret: str = "password"):
        self.secret = secret

    def verify(self, user: User, credential: str) -> bool:
        return credential == self.secret


class BcryptVerifier(CredentialVerifier):
    """Per-user bcrypt hashes keyed by email."""

    def __init__(self, hashes: Optional[Dict[str, str]] = None):
        self._hashes: Dict[str, str] = dict(hashes or {})
        self._lock = threading.Lock()

    @staticmethod
    def hash_credential(credential: str) -> str:
        """Hash a credential for storage.

        Raises:
            ValueError: If the credential is empty or longer than bcrypt accepts.
        """
        if not credential:
            raise ValueError("Password cannot be empty.")
        encoded = credential.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes.")
        return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode("utf-8")

    def enroll(self, user: User, credential: str) -> None:
        hashed = self.hash_credential(credential)
        with self._lock:
            self._hashes[user.email] = hashed
        logger.info(f"Enrolled credential for {user.email}")

    def verify(self, user: User, credential: str) -> bool:
        with self._lock:
            hashed = self._hashes.get(user.email)
        if hashed is None or not credential:
            return False
        encoded = credential.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            logger.warning(f"Credential for {user.email} exceeds {BCRYPT_MAX_BYTES} bytes, treated as a mismatch")
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Stored hash for {user.email} could not be checked: {e}")
            return False
