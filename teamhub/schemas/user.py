# teamhub/schemas/user.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from teamhub.schemas.base import BaseSchema, TimestampMixin, NonEmptyStr


class UserRegister(BaseModel):
    fullname: NonEmptyStr
    email: EmailStr
    skills: List[NonEmptyStr] = Field(min_length=1)
    username: NonEmptyStr
    password: NonEmptyStr
    git_token: NonEmptyStr


class UserLogin(BaseModel):
    username: Optional[str] = None
    # Normalized the same way as at registration
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class RefreshRequest(BaseModel):
    refresh_token: Optional[str] = None


# Public profile: never carries the password hash or any token
class User(TimestampMixin, BaseSchema):
    id: int
    username: str
    email: EmailStr
    fullname: str
    skills: List[str] = []


class RegisteredUser(BaseModel):
    user: User
    access_token: str


class LoggedInUser(BaseModel):
    user: User
    access_token: str
    refresh_token: str


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str


class GitToken(BaseModel):
    git_token: Optional[str] = None
