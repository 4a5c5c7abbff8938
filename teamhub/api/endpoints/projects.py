# teamhub/api/endpoints/projects.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from teamhub.db.session import get_db
from teamhub.middleware.auth import get_current_user
from teamhub.models.user import User
from teamhub.schemas.base import ApiResponse
from teamhub.schemas.project import (
    Project as ProjectSchema,
    ProjectCreate,
    ProjectWithTask,
    RepoLink,
    Task as TaskSchema,
    TaskCreate,
)
from teamhub.services import projects as project_service

router = APIRouter()


@router.post("", response_model=ApiResponse[ProjectSchema])
def create_project(
    project_in: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a project under a team (team owner only)
    """
    project = project_service.create_project(
        db,
        current_user,
        project_in.team_id,
        project_in.name,
        overview=project_in.overview,
        objectives=project_in.objectives,
        tech_stack=project_in.tech_stack,
    )
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=ProjectSchema.model_validate(project),
        message="Projects created successfully",
    )


@router.get("/{project_id}", response_model=ApiResponse[ProjectSchema])
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    project = project_service.get_project(db, project_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=ProjectSchema.model_validate(project),
        message="Project retrieved successfully",
    )


@router.post("/{project_id}/repo", response_model=ApiResponse[ProjectSchema], status_code=status.HTTP_201_CREATED)
def link_repository(
    project_id: int,
    repo_in: RepoLink,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Attach a source repository to a project
    """
    project = project_service.link_repository(db, project_id, repo_in.repo_name, repo_in.owner)
    return ApiResponse(
        statusCode=status.HTTP_201_CREATED,
        data=ProjectSchema.model_validate(project),
        message="Repository created and project updated",
    )


@router.post("/{project_id}/tasks", response_model=ApiResponse[ProjectWithTask], status_code=status.HTTP_201_CREATED)
def add_task(
    project_id: int,
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add a task to a project, assigned to a user by username
    (owner of the project's team only)
    """
    project, task = project_service.add_task(
        db,
        current_user,
        project_id,
        task_name=task_in.task_name,
        description=task_in.description,
        username=task_in.username,
        status=task_in.status,
        deadline=task_in.deadline,
    )
    return ApiResponse(
        statusCode=status.HTTP_201_CREATED,
        data=ProjectWithTask(
            project=ProjectSchema.model_validate(project),
            task=TaskSchema.model_validate(task),
        ),
        message="Task added to project successfully",
    )
