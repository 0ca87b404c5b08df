from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from teamdesk.config import settings
from teamdesk.db import get_db
from teamdesk.schemas.common import DeleteResult
from teamdesk.schemas.user import UserCreate, UserCreated, UserOut, UserPage, UserUpdate, UserUpdated
from teamdesk.services import user_service
from teamdesk.utils.pagination import parse_positive_int

router = APIRouter()

@router.get("/allUsers", response_model=List[UserOut])
async def get_all_users(db=Depends(get_db)):
    return await user_service.list_users(db)

@router.get("/users", response_model=UserPage)
async def get_users_page(
    # Kept as strings: bad values fall back to the defaults instead of a 422
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db=Depends(get_db)
):
    return await user_service.list_user_page(
        db,
        parse_positive_int(page, settings.DEFAULT_PAGE),
        parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT),
    )

@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: str, db=Depends(get_db)):
    return await user_service.get_user(db, user_id)

@router.post("/addUser", response_model=UserCreated, status_code=201)
async def add_user(user: UserCreate, db=Depends(get_db)):
    created = await user_service.create_user(db, user)
    return {"message": "User added successfully", "user": created, "statusCode": 200}

@router.delete("/deleteUser/{user_id}", response_model=DeleteResult)
async def delete_user(user_id: str, db=Depends(get_db)):
    deleted = await user_service.delete_user(db, user_id)
    return {"acknowledged": True, "deletedCount": deleted}

@router.put("/updateUser/{user_id}", response_model=UserUpdated)
async def update_user(user_id: str, user_update: UserUpdate, db=Depends(get_db)):
    await user_service.update_user(db, user_id, user_update)
    return {"message": "User updated successfully", "statusCode": 200}
