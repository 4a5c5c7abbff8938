# teamhub/schemas/project.py
from pydantic import BaseModel
from typing import Optional, List, Any
from datetime import datetime
from teamhub.schemas.base import BaseSchema, TimestampMixin, NonEmptyStr


class ProjectCreate(BaseModel):
    team_id: int
    name: NonEmptyStr
    overview: Optional[str] = None
    objectives: Optional[str] = None
    tech_stack: Optional[str] = None


class RepoLink(BaseModel):
    repo_name: NonEmptyStr
    owner: NonEmptyStr


class TaskCreate(BaseModel):
    task_name: NonEmptyStr
    description: NonEmptyStr
    username: NonEmptyStr
    status: NonEmptyStr
    deadline: datetime


class Project(TimestampMixin, BaseSchema):
    id: int
    name: str
    overview: Optional[str] = None
    objectives: Optional[str] = None
    tech_stack: Optional[str] = None
    team_id: int
    repo_name: Optional[str] = None
    repo_owner: Optional[str] = None
    repo_initialized: bool
    announcements: List[Any] = []
    task_ids: List[int] = []


class Task(TimestampMixin, BaseSchema):
    id: int
    name: str
    description: str
    status: str
    deadline: datetime
    assignee_id: int
    project_id: int


class ProjectWithTask(BaseModel):
    project: Project
    task: Task
