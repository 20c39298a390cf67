"""
ObjectId parsing shared by the services
"""
from typing import Any

from bson import ObjectId

from ..core.error_handling import ValidationError


def parse_object_id(value: Any, entity: str) -> ObjectId:
    """
    Turn a path or body value into an ObjectId

    Raises:
        ValidationError: when the value is not a 24-hex identifier
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {entity} id")
    return ObjectId(value)
