# teamhub/services/teams.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from teamhub.core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from teamhub.core.logging import logger
from teamhub.models.project import Project
from teamhub.models.team import Team
from teamhub.models.user import User


def get_team_or_404(db: Session, team_id: int) -> Team:
    team = db.get(Team, team_id)
    if not team:
        raise NotFoundError("Team not found")
    return team


def get_owned_team(db: Session, current_user: User, team_id: int, action: str) -> Team:
    """
    Load a team the caller owns. Raises NotFound if the team does not
    exist and Forbidden if the caller is not its owner.
    """
    team = get_team_or_404(db, team_id)
    if team.owner_id != current_user.id:
        logger.warning("Team ownership check failed", team_id=team.id, user_id=current_user.id)
        raise ForbiddenError(f"You do not have permission to {action} this team")
    return team


def create_team(db: Session, owner: User, name: str, description: Optional[str]) -> Team:
    team = Team(name=name, description=description, owner_id=owner.id)
    # Owner is initially added as a member
    team.members.append(owner)
    db.add(team)
    db.commit()
    db.refresh(team)
    logger.info("Team created", team_id=team.id, owner_id=owner.id)
    return team


def delete_team(db: Session, current_user: User, team_id: int) -> None:
    team = get_owned_team(db, current_user, team_id, "delete")

    # Projects and tasks of the team are left in place
    db.delete(team)
    db.commit()
    logger.info("Team deleted", team_id=team_id)


def update_team(
    db: Session, current_user: User, team_id: int, name: str, description: Optional[str]
) -> Team:
    team = get_owned_team(db, current_user, team_id, "update")

    team.name = name
    team.description = description
    db.commit()
    db.refresh(team)
    return team


def add_member(db: Session, current_user: User, team_id: int, username: str) -> User:
    team = get_owned_team(db, current_user, team_id, "add members to")

    member = db.query(User).filter(User.username == username.lower()).first()
    if not member:
        raise NotFoundError("Member user not found")

    if team.has_member(member.id):
        raise ConflictError("Member is already part of the team")

    team.members.append(member)
    db.commit()
    db.refresh(member)
    logger.info("Member added to team", team_id=team.id, user_id=member.id)
    return member


def remove_member(db: Session, current_user: User, team_id: int, member_id: int) -> Team:
    team = get_owned_team(db, current_user, team_id, "remove members from")

    member = db.get(User, member_id)
    if not member:
        raise NotFoundError("Member user not found")

    if not team.has_member(member.id):
        raise BadRequestError("Member is not part of the team")

    if member.id == team.owner_id:
        raise BadRequestError("The team owner cannot be removed from the team")

    team.members.remove(member)
    db.commit()
    db.refresh(team)
    logger.info("Member removed from team", team_id=team.id, user_id=member.id)
    return team


def list_teams_for_user(db: Session, user: User) -> List[Team]:
    return (
        db.query(Team)
        .filter(or_(Team.owner_id == user.id, Team.members.any(User.id == user.id)))
        .order_by(Team.id)
        .all()
    )


def list_members(db: Session, team_id: int) -> List[User]:
    team = get_team_or_404(db, team_id)
    return list(team.members)


def list_projects(db: Session, team_id: int) -> List[Project]:
    team = get_team_or_404(db, team_id)
    return list(team.projects)
