import json
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

from app.utils.identifiers import parse_user_id


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# Request schemas
class DocumentUploadForm(CamelModel):
    """Multipart fields sent alongside the uploaded file.

    Every field arrives as a string; the validators coerce them into their
    domain types so the upload handler only ever sees clean values.
    """
    title: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False
    user_id: Optional[int] = None

    @field_validator("title", mode="before")
    @classmethod
    def blank_title_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, value):
        if value is None or value == "":
            return []
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                raise ValueError("tags must be a JSON array of strings")
        return value

    @field_validator("is_public", mode="before")
    @classmethod
    def parse_is_public(cls, value):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, value):
        # Anything but a positive integer falls back to the caller's identity
        return parse_user_id(value)


class DocumentCreate(BaseModel):
    title: str
    filename: str
    file_type: str
    content: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False


class DocumentUpdate(CamelModel):
    """Fields a client may change after upload. Everything else is fixed."""
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    is_public: Optional[bool] = None

    class Config:
        extra = "forbid"

    @field_validator("title", "tags", "is_public", mode="before")
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


# Response schemas
class DocumentResponse(CamelModel):
    id: int
    title: str
    filename: str
    file_type: str
    content: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    user_id: Optional[int] = None
    is_public: bool = False
    share_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator("tags", mode="before")
    @classmethod
    def tags_never_null(cls, value):
        return [] if value is None else value

    @field_validator("is_public", mode="before")
    @classmethod
    def is_public_never_null(cls, value):
        return False if value is None else value


class DeleteResponse(BaseModel):
    success: bool
