from bson import ObjectId
from bson.errors import InvalidId

from earshop.domain.errors import ResourceNotFound


def to_object_id(value: str, what: str = "Resource") -> ObjectId:
    """A malformed id cannot match any document, so it is reported as not found."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ResourceNotFound(f"{what} {value} not found") from e
