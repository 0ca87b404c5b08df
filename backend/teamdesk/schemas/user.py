from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from teamdesk.models.user import Gender

class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: Optional[str] = None
    email: EmailStr
    gender: Gender
    avatar: str
    domain: str
    available: bool

    class Config:
        use_enum_values = True

class UserUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None  # checked against EmailStr after the merge
    gender: Optional[str] = None
    avatar: Optional[str] = None
    domain: Optional[str] = None
    available: Optional[bool] = None

class UserOut(BaseModel):
    store_id: str = Field(..., alias="_id")
    id: int
    first_name: str
    last_name: Optional[str] = None
    email: str  # plain str so legacy documents still serialize
    gender: str
    avatar: str
    domain: str
    available: bool

    class Config:
        populate_by_name = True

class UserPage(BaseModel):
    users: List[UserOut]
    totalPages: int
    currentPage: int
    # effective page size after the MAX_PAGE_LIMIT cap
    limit: int

class UserCreated(BaseModel):
    message: str
    user: UserOut
    statusCode: int = 200

class UserUpdated(BaseModel):
    message: str
    statusCode: int = 200
