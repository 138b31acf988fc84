from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class UserResponse(BaseModel):
    id: int
    username: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    class Config:
        from_attributes = True
