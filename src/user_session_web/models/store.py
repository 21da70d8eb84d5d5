import logging
import threading
from typing import Callable, Dict, List, Optional

from user_session_web.models.credentials import CredentialStrategy, HashedCredential, SequentialIds
from user_session_web.models.user import User, UserId


class UserStore:
    """
    In-memory user repository.

    Users live for the lifetime of the store; there is no update or delete.
    Emails are not unique: registering the same email twice creates two
    records, and lookups by email always return the first one registered.
    """

    def __init__(
        self,
        credential: Optional[CredentialStrategy] = None,
        next_id: Optional[Callable[[], UserId]] = None,
    ):
        self.credential = credential if credential is not None else HashedCredential()
        self._next_id = next_id if next_id is not None else SequentialIds()
        self._lock = threading.Lock()
        # dicts keep insertion order
        self._users: Dict[UserId, User] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def find(self, user_id: UserId) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def register(self, email: str, password: str) -> User:
        """
        Create and store a new user with a freshly assigned id.

        No uniqueness check is made on the email.
        """
        stored = self.credential.encode(password)
        with self._lock:
            user = User(id=self._next_id(), email=email, password=stored)
            self._users[user.id] = user
        logging.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> Optional[User]:
        """
        Return the user when email and password match, otherwise None.

        An unknown email and a wrong password give the same result.
        """
        user = self.find_by_email(email)
        if user and self.credential.verify(password, user.password):
            return user
        return None
