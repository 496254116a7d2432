# datagatekit/identity/directory.py
import logging
import threading
from typing import Iterable, List, Optional
from datagatekit.exceptions import DuplicateEmailError, InvalidCredentialsError
from datagatekit.identity.verifiers import CredentialVerifier, SharedSecretVerifier
from datagatekit.models.identity import Group, User

logger = logging.getLogger(__name__)


class IdentityDirectory:
    """Holds users and groups and handles login and registration.

    Registration accepts whatever group id is requested; there is no approval
    step before membership is granted. Pass allow_group_self_assignment=False
    to register every new user without a group instead.
    """

    def __init__(
        self,
        groups: Optional[Iterable[Group]] = None,
        users: Optional[Iterable[User]] = None,
        verifier: Optional[CredentialVerifier] = None,
        allow_group_self_assignment: bool = True,
    ):
        self._groups: List[Group] = list(groups or [])
        self._users: List[User] = list(users or [])
        self.verifier = verifier or SharedSecretVerifier()
        self.allow_group_self_assignment = allow_group_self_assignment
        self._lock = threading.Lock()

    def groups(self) -> List[Group]:
        return list(self._groups)

    def find_group(self, group_id: Optional[int]) -> Optional[Group]:
        if group_id is None:
            return None
        return next((group for group in self._groups if group.id == group_id), None)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return next((user for user in self._users if user.email == email), None)

    def login(self, email: str, credential: str) -> User:
        """Authenticate by exact email match and the configured verifier.

        Raises:
            InvalidCredentialsError: Unknown email or rejected credential.
        """
        user = self.find_by_email(email)
        if user is None or not self.verifier.verify(user, credential):
            logger.warning(f"Authentication failed for user: {email}")
            raise InvalidCredentialsError()
        logger.info(f"User logged in: {email}")
        return user

    def register(self, email: str, group_id: Optional[int] = None,
                 credential: Optional[str] = None) -> User:
        """Create a user with the next sequential id.

        The credential is enrolled before the user is stored, so a rejected
        credential leaves the directory unchanged.

        Raises:
            DuplicateEmailError: If the email is already registered.
            ValueError: If the verifier rejects the credential.
        """
        if group_id is not None and not self.allow_group_self_assignment:
            logger.info(f"Group self-assignment disabled; registering {email} without group {group_id}")
            group_id = None

        with self._lock:
            if any(user.email == email for user in self._users):
                logger.warning(f"Registration rejected, email already exists: {email}")
                raise DuplicateEmailError(email)
            group = self.find_group(group_id)
            user = User(
                id=len(self._users) + 1,
                email=email,
                is_active=True,
                group_id=group_id,
                group_name=group.name if group else None,
            )
            if credential is not None:
                try:
                    self.verifier.enroll(user, credential)
                except ValueError as e:
                    logger.warning(f"Registration rejected for {email}: {e}")
                    raise
            self._users.append(user)

        if group_id is not None:
            logger.warning(f"User {email} self-assigned to group {group_id} without approval")
        logger.info(f"Registered user {email} with id {user.id}")
        return user

    def users(self) -> List[User]:
        with self._lock:
            return list(self._users)
