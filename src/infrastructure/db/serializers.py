"""Conversion between BSON values and the JSON the API returns."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder
from src.core.errors import InvalidIdError


def to_object_id(value: str) -> ObjectId:
    """Parse a hex id from a path or body into an ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdError() from exc


def serialize_document(document: Any) -> Any:
    """Render a document, or a list of documents, as JSON-compatible data.

    ObjectIds become their hex string; datetimes become ISO-8601 strings.
    ``None`` passes through so missing lookups serialize to ``null``.
    """
    return jsonable_encoder(document, custom_encoder={ObjectId: str})
