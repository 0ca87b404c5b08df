from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from teamdesk.config import settings
from teamdesk.db import COUNTERS, USERS

USER_SEQUENCE = "userId"


async def _seed_user_sequence(db):
    """Start the counter at the highest ``id`` already stored, so a
    pre-populated collection keeps counting from where it is."""
    start = settings.USER_ID_START - 1
    latest = await db[USERS].find_one({}, sort=[("id", -1)], projection={"id": 1})
    if latest and isinstance(latest.get("id"), (int, float)):
        start = max(start, int(latest["id"]))
    try:
        await db[COUNTERS].insert_one({"_id": USER_SEQUENCE, "seq": start})
    except DuplicateKeyError:
        # seeded concurrently by another request
        pass


async def _increment(db):
    return await db[COUNTERS].find_one_and_update(
        {"_id": USER_SEQUENCE},
        {"$inc": {"seq": 1}},
        return_document=ReturnDocument.AFTER,
    )


async def next_user_id(db) -> int:
    """Hand out the next user ``id`` with a single atomic increment."""
    counter = await _increment(db)
    if counter is None:
        await _seed_user_sequence(db)
        counter = await _increment(db)
    return int(counter["seq"])
