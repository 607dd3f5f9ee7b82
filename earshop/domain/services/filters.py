import re
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, PositiveInt

from earshop.domain.services.constants import DEFAULT_LIMIT, DEFAULT_PAGE

_COLOR_SEPARATORS = re.compile(r"[&,]")


class Pagination(BaseModel):
    page: PositiveInt = DEFAULT_PAGE
    limit: PositiveInt = DEFAULT_LIMIT
    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _split_colors(value: str) -> List[str]:
    return [c for c in _COLOR_SEPARATORS.split(value) if c]


def build_search_filter(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Translate the optional search parameters into one MQL predicate for the
    'earphone' collection. Every supplied parameter adds a clause and all
    clauses are ANDed:

      type            -> case-insensitive pattern match on type
      otherType       -> type != value
      otherMusicHours -> hours.music != int(value)
      store           -> some stock entry has that store
      color           -> color list contains value
      otherColor      -> color list contains none of the values ('&' or ',' separated)
      min_price/max_price -> inclusive price range

    Input is expected to be validated already; unknown keys are ignored.
    """
    clauses: List[Dict[str, Any]] = []

    if params.get("type"):
        clauses.append({"type": {"$regex": re.escape(params["type"]), "$options": "i"}})

    if params.get("otherType"):
        clauses.append({"type": {"$ne": params["otherType"]}})

    if params.get("otherMusicHours") is not None:
        clauses.append({"hours.music": {"$ne": int(params["otherMusicHours"])}})

    if params.get("store"):
        clauses.append({"stock": {"$elemMatch": {"store": params["store"]}}})

    if params.get("color"):
        clauses.append({"color": {"$in": [params["color"]]}})

    if params.get("otherColor"):
        excluded = _split_colors(params["otherColor"])
        if excluded:
            clauses.append({"color": {"$nin": excluded}})

    price: Dict[str, Any] = {}
    if params.get("min_price") is not None:
        price["$gte"] = params["min_price"]
    if params.get("max_price") is not None:
        price["$lte"] = params["max_price"]
    if price:
        clauses.append({"price": price})

    if not clauses:
        return {}
    return clauses[0] if len(clauses) == 1 else {"$and": clauses}
