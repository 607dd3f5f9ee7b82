from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from earshop.domain.models.earphone import ObjectIdStr


class User(BaseModel):
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    username: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: str
    model_config = {"frozen": True}  # never carries the password digest


class LoginResult(User):
    token: str
