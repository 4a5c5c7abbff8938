# teamhub/schemas/team.py
from pydantic import BaseModel
from typing import Optional, List
from teamhub.schemas.base import BaseSchema, TimestampMixin, NonEmptyStr


class TeamCreate(BaseModel):
    name: NonEmptyStr
    description: Optional[str] = None


# Both fields are written back as given; omitted values clear the stored ones
class TeamUpdate(BaseModel):
    name: str = ""
    description: Optional[str] = None


class MemberAdd(BaseModel):
    team_id: int
    username: NonEmptyStr


class MemberRemove(BaseModel):
    team_id: int
    member_id: int


class Team(TimestampMixin, BaseSchema):
    id: int
    name: str
    description: Optional[str] = None
    owner_id: int
    member_ids: List[int] = []
    project_ids: List[int] = []
