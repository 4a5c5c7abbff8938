# teamhub/services/projects.py
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from teamhub.core.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from teamhub.core.logging import logger
from teamhub.models.project import Project
from teamhub.models.task import Task
from teamhub.models.team import Team
from teamhub.models.user import User


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project


def create_project(
    db: Session,
    current_user: User,
    team_id: int,
    name: str,
    overview: Optional[str] = None,
    objectives: Optional[str] = None,
    tech_stack: Optional[str] = None,
) -> Project:
    """
    Create a project under a team. Only the team owner may do this.
    """
    team = db.get(Team, team_id)
    if not team or team.owner_id != current_user.id:
        logger.warning("Project creation refused", team_id=team_id, user_id=current_user.id)
        raise ForbiddenError("Forbidden: User does not have permission")

    project = Project(
        name=name,
        overview=overview,
        objectives=objectives,
        tech_stack=tech_stack,
        team_id=team.id,
        announcements=[],
        repo_initialized=True,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Project created", project_id=project.id, team_id=team.id)
    return project


def link_repository(db: Session, project_id: int, repo_name: str, owner: str) -> Project:
    """
    Record the source repository backing a project. Safe to repeat.
    """
    project = get_project(db, project_id)

    project.repo_name = repo_name
    project.repo_owner = owner
    project.repo_initialized = True
    db.commit()
    db.refresh(project)
    logger.info("Repository linked", project_id=project.id, repo=f"{owner}/{repo_name}")
    return project


def add_task(
    db: Session,
    current_user: User,
    project_id: int,
    task_name: str,
    description: str,
    username: str,
    status: str,
    deadline: datetime,
) -> Tuple[Project, Task]:
    """
    Create a task in a project and assign it to a user.

    The assignee and project are resolved first; only the owner of the
    project's team may add tasks. The task and its place in the project's
    task list are written in one commit.
    """
    assignee = db.query(User).filter(User.username == username.lower()).first()
    if not assignee:
        raise NotFoundError("User not found")

    project = get_project(db, project_id)

    team = db.get(Team, project.team_id)
    if not team:
        raise ForbiddenError("Project does not have an associated team")

    if team.owner_id != current_user.id:
        logger.warning("Task creation refused", project_id=project.id, user_id=current_user.id)
        raise UnauthorizedError("Unauthorized!")

    task = Task(
        name=task_name,
        description=description,
        assignee_id=assignee.id,
        status=status,
        deadline=deadline,
    )
    project.tasks.append(task)
    db.commit()
    db.refresh(project)
    db.refresh(task)
    logger.info("Task added to project", project_id=project.id, task_id=task.id, assignee_id=assignee.id)
    return project, task
