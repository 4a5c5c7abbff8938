# teamhub/api/endpoints/teams.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from teamhub.db.session import get_db
from teamhub.middleware.auth import get_current_user
from teamhub.models.user import User
from teamhub.schemas.base import ApiResponse
from teamhub.schemas.project import Project as ProjectSchema
from teamhub.schemas.team import Team as TeamSchema, TeamCreate, TeamUpdate, MemberAdd, MemberRemove
from teamhub.schemas.user import User as UserSchema
from teamhub.services import teams as team_service

router = APIRouter()


@router.post("", response_model=ApiResponse[TeamSchema], status_code=status.HTTP_201_CREATED)
def create_team(
    team_in: TeamCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new team owned by the current user
    """
    team = team_service.create_team(db, current_user, team_in.name, team_in.description)
    return ApiResponse(
        statusCode=status.HTTP_201_CREATED,
        data=TeamSchema.model_validate(team),
        message="Team created Successfully",
    )


@router.get("/mine", response_model=ApiResponse[List[TeamSchema]])
def get_my_teams(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get the teams the current user owns or belongs to
    """
    teams = team_service.list_teams_for_user(db, current_user)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=[TeamSchema.model_validate(team) for team in teams],
        message="Teams retrieved successfully",
    )


@router.post("/members", response_model=ApiResponse[UserSchema])
def add_member(
    member_in: MemberAdd,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add a user to a team by username (team owner only)
    """
    member = team_service.add_member(db, current_user, member_in.team_id, member_in.username)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=UserSchema.model_validate(member),
        message="Member added to the team successfully",
    )


@router.delete("/members", response_model=ApiResponse[TeamSchema])
def remove_member(
    member_in: MemberRemove,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Remove a member from a team (team owner only)
    """
    team = team_service.remove_member(db, current_user, member_in.team_id, member_in.member_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=TeamSchema.model_validate(team),
        message="Member removed from the team successfully",
    )


@router.put("/{team_id}", response_model=ApiResponse[TeamSchema])
def update_team(
    team_id: int,
    team_in: TeamUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update a team's name and description (team owner only)
    """
    team = team_service.update_team(db, current_user, team_id, team_in.name, team_in.description)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=TeamSchema.model_validate(team),
        message="Team updated successfully",
    )


@router.delete("/{team_id}", response_model=ApiResponse[str])
def delete_team(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a team (team owner only). Its projects are not removed.
    """
    team_service.delete_team(db, current_user, team_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data="Delete Happened",
        message="Team deleted successfully",
    )


@router.get("/{team_id}/members", response_model=ApiResponse[List[UserSchema]])
def get_team_members(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    members = team_service.list_members(db, team_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=[UserSchema.model_validate(member) for member in members],
        message="Team members fetched successfully",
    )


@router.get("/{team_id}/projects", response_model=ApiResponse[List[ProjectSchema]])
def get_team_projects(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    projects = team_service.list_projects(db, team_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=[ProjectSchema.model_validate(project) for project in projects],
        message="Projects retrieved successfully",
    )
