from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from enum import Enum

class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

class User(BaseModel):
    """Full schema of a document in the Users collection (without ``_id``)."""
    id: int
    first_name: str = Field(..., min_length=1)
    last_name: Optional[str] = None
    email: EmailStr
    gender: Gender
    avatar: str
    domain: str
    available: bool

    class Config:
        use_enum_values = True
