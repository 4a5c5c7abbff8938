# teamhub/schemas/base.py
from datetime import datetime
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, StringConstraints

# Required text field: surrounding whitespace stripped, must not be empty
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

DataT = TypeVar("DataT")


class TimestampMixin(BaseModel):
    """Timestamp fields for database models"""
    created_at: datetime
    updated_at: datetime


class BaseSchema(BaseModel):
    """Base schema with common configuration"""
    class Config:
        from_attributes = True


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope shared by every endpoint"""
    statusCode: int
    data: Optional[DataT] = None
    message: str
