from fastapi import APIRouter, Depends
from typing import List
from teamdesk.db import get_db
from teamdesk.schemas.common import DeleteResult
from teamdesk.schemas.team import TeamCreate, TeamCreated, TeamOut
from teamdesk.services import team_service

router = APIRouter()

@router.post("/addTeam", response_model=TeamCreated, status_code=201)
async def add_team(team: TeamCreate, db=Depends(get_db)):
    created = await team_service.create_team(db, team)
    return {"message": "Team added successfully", "user": created, "statusCode": 200}

@router.get("/allTeams", response_model=List[TeamOut])
async def get_all_teams(db=Depends(get_db)):
    return await team_service.list_teams(db)

@router.delete("/deleteTeam/{team_id}", response_model=DeleteResult)
async def delete_team(team_id: str, db=Depends(get_db)):
    deleted = await team_service.delete_team(db, team_id)
    return {"acknowledged": True, "deletedCount": deleted}
