# teamhub/api/endpoints/users.py
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.orm import Session

from teamhub.core.config import settings
from teamhub.db.session import get_db
from teamhub.middleware.auth import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, get_current_user
from teamhub.models.user import User
from teamhub.schemas.base import ApiResponse
from teamhub.schemas.user import (
    GitToken,
    LoggedInUser,
    RefreshRequest,
    RegisteredUser,
    TokenPair,
    User as UserSchema,
    UserLogin,
    UserRegister,
)
from teamhub.services import auth as auth_service

router = APIRouter()


def set_session_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    # Http-only so frontend scripts cannot read or change them
    options = {"httponly": True, "secure": settings.COOKIE_SECURE}
    response.set_cookie(ACCESS_TOKEN_COOKIE, access_token, **options)
    response.set_cookie(REFRESH_TOKEN_COOKIE, refresh_token, **options)


@router.post("/register", response_model=ApiResponse[RegisteredUser], status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserRegister, db: Session = Depends(get_db)):
    """
    Create an account and return it with a first access token
    """
    user, access_token = auth_service.register_user(db, user_in)
    return ApiResponse(
        statusCode=status.HTTP_201_CREATED,
        data=RegisteredUser(user=UserSchema.model_validate(user), access_token=access_token),
        message="User registered Successfully",
    )


@router.post("/login", response_model=ApiResponse[LoggedInUser])
def login_user(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    """
    Log in with username or email. Sets the access and refresh tokens as
    cookies and also returns them in the body.
    """
    user, access_token, refresh_token = auth_service.login_user(
        db, credentials.username, credentials.email, credentials.password
    )
    set_session_cookies(response, access_token, refresh_token)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=LoggedInUser(
            user=UserSchema.model_validate(user),
            access_token=access_token,
            refresh_token=refresh_token,
        ),
        message="User logged In Successfully",
    )


@router.post("/logout", response_model=ApiResponse[dict])
def logout_user(
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    auth_service.logout_user(db, current_user)

    options = {"httponly": True, "secure": settings.COOKIE_SECURE}
    response.delete_cookie(ACCESS_TOKEN_COOKIE, **options)
    response.delete_cookie(REFRESH_TOKEN_COOKIE, **options)
    return ApiResponse(statusCode=status.HTTP_200_OK, data={}, message="User logged out")


@router.post("/refresh", response_model=ApiResponse[TokenPair])
def refresh_access_token(
    request: Request,
    response: Response,
    body: Optional[RefreshRequest] = Body(None),
    db: Session = Depends(get_db),
):
    """
    Exchange a refresh token (cookie or body) for a new token pair
    """
    incoming_token = request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not incoming_token and body is not None:
        incoming_token = body.refresh_token

    access_token, refresh_token = auth_service.refresh_tokens(db, incoming_token)
    set_session_cookies(response, access_token, refresh_token)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=TokenPair(access_token=access_token, refresh_token=refresh_token),
        message="Access token refreshed",
    )


@router.get("/me", response_model=ApiResponse[UserSchema])
def get_current_user_details(current_user: User = Depends(get_current_user)):
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=UserSchema.model_validate(current_user),
        message="User data retrieved successfully",
    )


@router.get("/{user_id}/git-token", response_model=ApiResponse[GitToken])
def get_git_token(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get a user's git token (the user themself or a teammate only)
    """
    git_token = auth_service.get_git_token(db, current_user, user_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=GitToken(git_token=git_token),
        message="User data retrieved successfully",
    )
