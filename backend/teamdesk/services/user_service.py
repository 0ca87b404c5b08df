from typing import List
from pymongo.errors import DuplicateKeyError
from teamdesk.db import USERS
from teamdesk.errors import NotFoundError
from teamdesk.models.user import User
from teamdesk.schemas.user import UserCreate, UserUpdate
from teamdesk.services.records import (
    delete_by_store_id, duplicate_conflict, find_all, find_by_store_id,
)
from teamdesk.services.sequence_service import next_user_id
from teamdesk.utils.logger import log_event, EventTypes
from teamdesk.utils.object_id import parse_object_id, serialize
from teamdesk.utils.pagination import page_window

DUPLICATE_MESSAGES = {
    "email": "User with this email already exists",
    "id": "User id is already assigned",
}


async def list_users(db) -> List[dict]:
    return await find_all(db[USERS])


async def list_user_page(db, page: int, limit: int) -> dict:
    total = await db[USERS].count_documents({})
    window = page_window(total, page, limit)

    users = await db[USERS].find({}).skip(window.skip).limit(window.limit).to_list(None)

    return {
        "users": [serialize(user) for user in users],
        "totalPages": window.total_pages,
        "currentPage": window.page,
        "limit": window.limit,
    }


async def get_user(db, store_id: str) -> dict:
    return await find_by_store_id(db[USERS], store_id, "User")


async def create_user(db, payload: UserCreate) -> dict:
    user_doc = {"id": await next_user_id(db), **payload.dict()}

    try:
        await db[USERS].insert_one(user_doc)
    except DuplicateKeyError as e:
        raise duplicate_conflict(e, DUPLICATE_MESSAGES)

    await log_event(db, EventTypes.USER_CREATED, {"user_id": str(user_doc["_id"]), "id": user_doc["id"]})
    return serialize(user_doc)


async def update_user(db, store_id: str, payload: UserUpdate):
    """Merge the given fields into the stored user.

    The merged document is validated against the full ``User`` schema before
    anything is written; a mismatch raises pydantic's ``ValidationError``.
    """
    oid = parse_object_id(store_id, "user")
    existing = await db[USERS].find_one({"_id": oid})
    if not existing:
        raise NotFoundError("User not found")

    changes = payload.dict(exclude_unset=True)
    merged = {key: value for key, value in existing.items() if key != "_id"}
    merged.update(changes)
    validated = User(**merged).dict()

    if not changes:
        return

    try:
        result = await db[USERS].update_one(
            {"_id": oid},
            {"$set": {field: validated[field] for field in changes}},
        )
    except DuplicateKeyError as e:
        raise duplicate_conflict(e, DUPLICATE_MESSAGES)

    if result.matched_count == 0:
        raise NotFoundError("User not found")

    await log_event(db, EventTypes.USER_UPDATED, {"user_id": store_id, "fields": sorted(changes)})


async def delete_user(db, store_id: str) -> int:
    deleted = await delete_by_store_id(db[USERS], store_id, "User")
    await log_event(db, EventTypes.USER_DELETED, {"user_id": store_id})
    return deleted
