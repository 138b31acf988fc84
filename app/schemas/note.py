from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime


class NoteCreate(BaseModel):
    title: str
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str = "Math"
    is_public: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value):
        if not value.strip():
            raise ValueError("title may not be blank")
        return value


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    is_public: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    @field_validator("title", "content", "tags", "category", "is_public", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value):
        if not value.strip():
            raise ValueError("title may not be blank")
        return value


class NoteResponse(BaseModel):
    id: int
    title: str
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str
    user_id: Optional[int] = None
    is_public: bool = False
    share_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("tags", mode="before")
    @classmethod
    def tags_never_null(cls, value):
        return [] if value is None else value
