from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import AfterValidator, AliasChoices, BaseModel, BeforeValidator, Field, NonNegativeInt, PositiveInt, StringConstraints

from earshop.domain.services.constants import STORE_PATTERN

# ObjectId (or anything str()-able) rendered as its hex string
ObjectIdStr = Annotated[str, BeforeValidator(str)]


def _as_utc(value: datetime) -> datetime:
    # the store hands back naive UTC unless the client is tz_aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class StockEntry(BaseModel):
    store: Annotated[str, StringConstraints(pattern=STORE_PATTERN)]
    qty: NonNegativeInt
    model_config = {"frozen": True, "extra": "forbid"}


class Hours(BaseModel):
    music: PositiveInt
    cableCharging: PositiveInt
    boxCharging: NonNegativeInt = 0
    model_config = {"frozen": True, "extra": "forbid"}


class Review(BaseModel):
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    email: str
    comments: str
    rating: Optional[int] = None
    date: Optional[UtcDatetime] = None
    model_config = {"frozen": True}


class EarphoneSummary(BaseModel):
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    brandModel: str
    type: str
    earbuds: Optional[str] = None
    bluetooth: Optional[str] = None
    price: float
    stock: Optional[List[StockEntry]] = None
    color: List[str]
    hours: Optional[Hours] = None
    dustWaterproof: Optional[bool] = None
    connectors: str
    image: Optional[str] = None
    model_config = {"frozen": True}


class Earphone(EarphoneSummary):
    review: List[Review] = []


class ReviewList(BaseModel):
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    brandModel: str
    review: List[Review] = []
    model_config = {"frozen": True}


class UserReview(BaseModel):
    """One review written by a user, with the product it belongs to."""
    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    brandModel: str
    review: Review
    model_config = {"frozen": True}
