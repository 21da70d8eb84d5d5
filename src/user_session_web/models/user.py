from typing import Union

from pydantic import BaseModel, ConfigDict

UserId = Union[int, str]


class User(BaseModel):
    """
    Pydantic model representing a registered account.
    Attributes:
        id (int | str): Identifier assigned at registration, never reused.
        email (str): Email the account was registered with; not unique.
        password (str): Stored credential, a bcrypt hash or the plaintext
            password depending on the store's credential strategy.
    """
    model_config = ConfigDict(frozen=True)

    id: UserId
    email: str
    password: str
