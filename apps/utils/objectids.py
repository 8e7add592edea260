from __future__ import annotations

from bson import ObjectId
from bson.errors import InvalidId

def parse_object_id(value) -> ObjectId | None:
    """Return ``value`` as an ObjectId, or None when it is not a valid one."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None
