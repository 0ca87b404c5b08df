from pydantic import BaseModel, Field
from typing import Any, List

class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1)
    members: List[Any]

class TeamOut(BaseModel):
    store_id: str = Field(..., alias="_id")
    name: str
    members: List[Any] = []

    class Config:
        populate_by_name = True

class TeamCreated(BaseModel):
    message: str
    # existing clients read the created team from "user"
    user: TeamOut
    statusCode: int = 200
