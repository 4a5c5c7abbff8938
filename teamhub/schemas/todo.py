# teamhub/schemas/todo.py
from pydantic import BaseModel
from typing import Optional
from teamhub.schemas.base import BaseSchema, TimestampMixin, NonEmptyStr


class TodoCreate(BaseModel):
    title: NonEmptyStr
    description: NonEmptyStr


# Missing or empty fields keep the stored value
class TodoUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class Todo(TimestampMixin, BaseSchema):
    id: int
    title: str
    description: str
    created_by: int
