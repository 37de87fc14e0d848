# app/utils/mongo_utils.py
import uuid
from typing import Any, Union

from bson import ObjectId

from app.utils.exceptions import ValidationError

MovieKey = Union[str, ObjectId]


def parse_movie_id(value: Any) -> MovieKey:
    """
    Turn a client supplied movie id into the key stored under ``_id``.

    Movies created through the API use UUID4 strings; documents loaded by
    other tools carry ObjectIds. Anything else is rejected before the store
    is queried.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Invalid movie id")
    value = value.strip()
    if ObjectId.is_valid(value) and len(value) == 24:
        return ObjectId(value)
    try:
        # stored ids are the lowercase dashed form
        return str(uuid.UUID(value))
    except ValueError:
        raise ValidationError("Invalid movie id")


def convert_objectid_to_str(document):
    """Convert ObjectId values in a MongoDB document (recursively) to strings."""
    if isinstance(document, ObjectId):
        return str(document)
    if isinstance(document, dict):
        return {k: convert_objectid_to_str(v) for k, v in document.items()}
    if isinstance(document, list):
        return [convert_objectid_to_str(v) for v in document]
    return document
