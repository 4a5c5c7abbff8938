# teamhub/db/base.py
from teamhub.db.session import Base

# Import all models so they are registered on Base.metadata
from teamhub.models.user import User
from teamhub.models.team import Team, team_members
from teamhub.models.project import Project
from teamhub.models.task import Task
from teamhub.models.todo import Todo
