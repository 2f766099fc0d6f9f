"""
models/ids.py
-------------
Coercion of caller-supplied identifiers to MongoDB ObjectIds.
"""

from bson import ObjectId
from bson.errors import InvalidId

from models.errors import ValidationError


def to_object_id(value: ObjectId | str, field: str = "event_id") -> ObjectId:
    """Coerce a 24-hex string to an ObjectId, naming `field` on failure."""
    if isinstance(value, ObjectId):
        return value
    if value is None:
        raise ValidationError(field, f'Field "{field}" is required')
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(field, f"Invalid {field}: {value!r}") from None
