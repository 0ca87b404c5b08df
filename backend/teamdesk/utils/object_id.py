from bson import ObjectId
from bson.errors import InvalidId
from teamdesk.errors import InvalidIdentifierError


def parse_object_id(value: str, label: str = "record") -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(f"Invalid {label} ID")


def serialize(doc: dict) -> dict:
    """Return a copy of a stored document with ``_id`` as a string."""
    doc = dict(doc)
    doc["_id"] = str(doc["_id"])
    return doc
