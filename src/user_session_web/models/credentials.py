import itertools
import logging
import uuid
from typing import Iterator, Protocol

from passlib.context import CryptContext

from user_session_web.models.user import UserId

SALT_ROUNDS = 10


class CredentialStrategy(Protocol):
    """
    How a password is turned into a stored credential and checked against it.
    """
    name: str

    def encode(self, password: str) -> str: ...

    def verify(self, password: str, stored: str) -> bool: ...


class HashedCredential:
    """
    Stores a salted bcrypt hash; the plaintext is never kept.
    """
    name = "bcrypt"

    def __init__(self, rounds: int = SALT_ROUNDS):
        self.rounds = rounds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def encode(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, password: str, stored: str) -> bool:
        """
        Verify a plain password against its hashed version using passlib.
        A stored value that is not a bcrypt hash counts as a mismatch.
        """
        try:
            return self.pwd_context.verify(password, stored)
        except Exception as e:
            logging.error(e, exc_info=True)
            return False


class PlaintextCredential:
    """
    Stores the password verbatim and compares by equality. Demo only.
    """
    name = "plaintext"

    def encode(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return password == stored


def credential_for(scheme: str, rounds: int = SALT_ROUNDS) -> CredentialStrategy:
    if scheme == "bcrypt":
        return HashedCredential(rounds=rounds)
    if scheme == "plaintext":
        return PlaintextCredential()
    raise ValueError(f"Unsupported credential scheme: {scheme}")


class SequentialIds:
    """1, 2, 3, ... in registration order."""

    def __init__(self, start: int = 1):
        self._counter: Iterator[int] = itertools.count(start)

    def __call__(self) -> UserId:
        return next(self._counter)


class RandomIds:
    """Random uuid4 hex strings."""

    def __call__(self) -> UserId:
        return uuid.uuid4().hex


def ids_for(scheme: str):
    if scheme == "sequential":
        return SequentialIds()
    if scheme == "uuid":
        return RandomIds()
    raise ValueError(f"Unsupported user id scheme: {scheme}")
