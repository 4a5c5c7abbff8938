# teamhub/models/__init__.py
# Import models here so they can be imported from teamhub.models
from teamhub.models.user import User
from teamhub.models.team import Team, team_members
from teamhub.models.project import Project
from teamhub.models.task import Task
from teamhub.models.todo import Todo
