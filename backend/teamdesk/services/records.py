"""
Operations shared by every record kind: load all, load one by store id,
delete one by store id, and translating unique-index violations.
"""
from typing import Dict, List
from pymongo.errors import DuplicateKeyError
from teamdesk.errors import ConflictError, NotFoundError
from teamdesk.utils.object_id import parse_object_id, serialize


async def find_all(collection) -> List[dict]:
    docs = await collection.find({}).to_list(None)
    return [serialize(doc) for doc in docs]


async def find_by_store_id(collection, store_id: str, label: str) -> dict:
    oid = parse_object_id(store_id, label.lower())
    doc = await collection.find_one({"_id": oid})
    if not doc:
        raise NotFoundError(f"{label} not found")
    return serialize(doc)


async def delete_by_store_id(collection, store_id: str, label: str) -> int:
    oid = parse_object_id(store_id, label.lower())
    result = await collection.delete_one({"_id": oid})
    if result.deleted_count == 0:
        raise NotFoundError(f"{label} not found", details={"deletedCount": 0})
    return result.deleted_count


def duplicate_conflict(exc: DuplicateKeyError, messages: Dict[str, str]) -> ConflictError:
    """Pick the conflict message for the unique field that was violated.

    Servers report the field in ``keyPattern``; older ones only name the
    index (``<field>_unique``) in the error text.
    """
    key_pattern = (exc.details or {}).get("keyPattern") or {}
    for field, message in messages.items():
        if field in key_pattern or f"{field}_unique" in str(exc):
            return ConflictError(message)
    return ConflictError("Record already exists")
