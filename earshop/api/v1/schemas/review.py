from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StrictInt, StringConstraints

from earshop.api.v1.schemas.common import EchoedId, Email


class ReviewIn(BaseModel):
    id: EchoedId = None
    email: Email
    comments: Annotated[str, StringConstraints(min_length=1)]
    rating: Optional[StrictInt] = Field(default=None, gt=0, lt=6)

    model_config = {"extra": "forbid"}


class ReviewEdit(ReviewIn):
    # defaults to the time of the edit
    date: Optional[datetime] = None
