from typing import List
from pymongo.errors import DuplicateKeyError
from teamdesk.db import TEAMS
from teamdesk.schemas.team import TeamCreate
from teamdesk.services.records import delete_by_store_id, duplicate_conflict, find_all
from teamdesk.utils.logger import log_event, EventTypes
from teamdesk.utils.object_id import serialize


async def list_teams(db) -> List[dict]:
    return await find_all(db[TEAMS])


async def create_team(db, payload: TeamCreate) -> dict:
    team_doc = payload.dict()

    try:
        await db[TEAMS].insert_one(team_doc)
    except DuplicateKeyError as e:
        raise duplicate_conflict(e, {"name": "Team with this Name already exists"})

    await log_event(db, EventTypes.TEAM_CREATED, {"team_id": str(team_doc["_id"]), "name": team_doc["name"]})
    return serialize(team_doc)


async def delete_team(db, store_id: str) -> int:
    deleted = await delete_by_store_id(db[TEAMS], store_id, "Team")
    await log_event(db, EventTypes.TEAM_DELETED, {"team_id": store_id})
    return deleted
