# earshop/api/v1/schemas/earphone.py
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints

from earshop.api.v1.schemas.common import EchoedId
from earshop.domain.models.earphone import Hours, StockEntry
from earshop.domain.services.constants import BRAND_MODEL_PATTERN, IMAGE_PATTERN, TOKEN_PATTERN

Token = Annotated[str, StringConstraints(pattern=TOKEN_PATTERN)]


class EarphoneIn(BaseModel):
    """
    Product payload for POST /add and PUT /earphone/{id}.
    On update, optional fields the caller leaves out keep their stored value;
    fields sent explicitly (even empty or null) replace it.
    """
    id: EchoedId = None
    brandModel: Annotated[str, StringConstraints(pattern=BRAND_MODEL_PATTERN)]
    type: Token
    earbuds: Optional[str] = None
    bluetooth: Optional[str] = None
    # strict: a JSON boolean is not a price
    price: Annotated[float, Field(gt=0, strict=True)]
    stock: Optional[List[StockEntry]] = None
    color: List[str] = Field(min_length=1)
    hours: Optional[Hours] = None
    dustWaterproof: bool = False
    connectors: Token
    image: Optional[Annotated[str, StringConstraints(pattern=IMAGE_PATTERN)]] = None

    model_config = {"extra": "forbid"}
