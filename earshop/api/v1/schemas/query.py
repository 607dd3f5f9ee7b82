from typing import Annotated, Optional

from pydantic import BaseModel, PositiveInt, StringConstraints

from earshop.api.v1.schemas.common import Alphanum, Email
from earshop.domain.services.constants import (
    COLOR_LIST_PATTERN,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    STORE_PATTERN,
    TOKEN_PATTERN,
)


class SearchQuery(BaseModel):
    """Query string accepted by the product search and the per-user review listing."""
    type: Optional[Annotated[str, StringConstraints(pattern=TOKEN_PATTERN)]] = None
    otherType: Optional[Annotated[str, StringConstraints(pattern=TOKEN_PATTERN)]] = None
    store: Optional[Annotated[str, StringConstraints(pattern=STORE_PATTERN)]] = None
    color: Optional[Annotated[str, StringConstraints(pattern=STORE_PATTERN)]] = None
    otherColor: Optional[Annotated[str, StringConstraints(pattern=COLOR_LIST_PATTERN)]] = None
    otherMusicHours: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    id: Optional[Alphanum] = None
    reviewid: Optional[Alphanum] = None
    limit: PositiveInt = DEFAULT_LIMIT
    page: PositiveInt = DEFAULT_PAGE
    email: Optional[Email] = None

    model_config = {"extra": "forbid"}
