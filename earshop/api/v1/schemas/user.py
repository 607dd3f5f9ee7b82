from typing import Any, Optional

from pydantic import BaseModel

from earshop.api.v1.schemas.common import Alphanum, EchoedId, Email, Password


class SignupIn(BaseModel):
    username: Alphanum
    firstname: Optional[Alphanum] = None
    lastname: Optional[Alphanum] = None
    email: Email
    password: Password

    model_config = {"extra": "forbid"}


class LoginIn(BaseModel):
    email: Email
    # any shape is accepted, a wrong value simply fails the hash comparison
    password: Any = None

    model_config = {"extra": "forbid"}


class UserUpdateIn(BaseModel):
    """Only the names are editable; email and password are not part of this payload."""
    id: EchoedId = None
    username: Alphanum
    firstname: Optional[Alphanum] = None
    lastname: Optional[Alphanum] = None

    model_config = {"extra": "forbid"}
