# teamhub/services/auth.py
"""
Registration, login and the refresh-token lifecycle.

A user holds at most one refresh token. Logging in or refreshing replaces
it, so a second device logging in ends the first device's session, and a
refresh token can be exchanged exactly once.
"""
from typing import Optional, Tuple

from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teamhub.core.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from teamhub.core.logging import logger
from teamhub.core.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    hash_password,
    verify_password,
)
from teamhub.models.team import Team
from teamhub.models.user import User
from teamhub.schemas.user import UserRegister


def _issue_tokens(db: Session, user: User) -> Tuple[str, str]:
    """Mint a new access/refresh pair and store the refresh token on the user"""
    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)
    user.refresh_token = refresh_token
    db.commit()
    return access_token, refresh_token


def find_user_by_username_or_email(db: Session, username: str, email: str) -> Optional[User]:
    return (
        db.query(User)
        .filter(or_(User.username == username, User.email == email))
        .first()
    )


def register_user(db: Session, user_in: UserRegister) -> Tuple[User, str]:
    username = user_in.username.lower()

    if find_user_by_username_or_email(db, username, user_in.email):
        logger.warning("Registration rejected, username or email taken", username=username)
        raise ConflictError("User with this email or username already exists")

    user = User(
        username=username,
        email=user_in.email,
        fullname=user_in.fullname,
        skills=list(user_in.skills),
        git_token=user_in.git_token,
        hashed_password=hash_password(user_in.password),
    )
    db.add(user)
    try:
        db.flush()  # Flush to get user ID for the token subject
    except IntegrityError:
        # A concurrent registration took the username or email first
        db.rollback()
        logger.warning("Registration lost a race for username or email", username=username)
        raise ConflictError("User with this email or username already exists")

    access_token, _ = _issue_tokens(db, user)
    db.refresh(user)
    logger.info("User registered", user_id=user.id, username=user.username)
    return user, access_token


def login_user(
    db: Session,
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> Tuple[User, str, str]:
    if not (username or email):
        raise BadRequestError("username or email is required")
    if not password:
        raise BadRequestError("password is required")

    filters = []
    if username:
        filters.append(User.username == username.lower())
    if email:
        filters.append(User.email == email)
    user = db.query(User).filter(or_(*filters)).first()

    if not user:
        raise NotFoundError("User does not exist")

    if not verify_password(password, user.hashed_password):
        logger.warning("Invalid password", user_id=user.id)
        raise UnauthorizedError("Invalid user credentials")

    access_token, refresh_token = _issue_tokens(db, user)
    db.refresh(user)
    logger.info("User logged in", user_id=user.id)
    return user, access_token, refresh_token


def refresh_tokens(db: Session, incoming_token: Optional[str]) -> Tuple[str, str]:
    """
    Exchange a refresh token for a new pair. The stored token is swapped
    only if it still equals the presented one, so a used or superseded
    token is rejected.
    """
    if not incoming_token:
        raise UnauthorizedError("Unauthorized request")

    payload = decode_refresh_token(incoming_token)
    user = db.get(User, int(payload["sub"]))
    if not user:
        raise UnauthorizedError("Invalid refresh token")

    if incoming_token != user.refresh_token:
        logger.warning("Refresh token reused or expired", user_id=user.id)
        raise UnauthorizedError("Refresh token is expired or used")

    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)

    result = db.execute(
        update(User)
        .where(User.id == user.id, User.refresh_token == incoming_token)
        .values(refresh_token=refresh_token)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        # Another request rotated the token between our read and write
        db.rollback()
        logger.warning("Refresh token rotated concurrently", user_id=user.id)
        raise UnauthorizedError("Refresh token is expired or used")
    db.commit()

    logger.info("Access token refreshed", user_id=user.id)
    return access_token, refresh_token


def logout_user(db: Session, user: User) -> None:
    user.refresh_token = None
    db.commit()
    logger.info("User logged out", user_id=user.id)


def get_git_token(db: Session, current_user: User, user_id: int) -> Optional[str]:
    """
    Return a user's git token. Readable by the user and by anyone who
    shares a team with them.
    """
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    if user.id != current_user.id:
        shared_team = (
            db.query(Team.id)
            .filter(Team.members.any(User.id == current_user.id))
            .filter(Team.members.any(User.id == user.id))
            .first()
        )
        if not shared_team:
            raise ForbiddenError("Not authorized to read this user's git token")

    return user.git_token
