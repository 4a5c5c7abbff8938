# teamhub/middleware/auth.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from teamhub.core.exceptions import UnauthorizedError
from teamhub.core.logging import logger
from teamhub.core.security import decode_access_token
from teamhub.db.session import get_db
from teamhub.models.user import User

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

bearer_scheme = HTTPBearer(auto_error=False)


def get_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Read the access token from the session cookie, falling back to the
    Authorization: Bearer header
    """
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token and credentials is not None:
        token = credentials.credentials

    if not token:
        logger.warning("Access token missing from request")
        raise UnauthorizedError("Unauthorized request")
    return token


async def get_current_user(
    token: str = Depends(get_access_token), db: Session = Depends(get_db)
) -> User:
    """
    Resolve the caller from a valid access token
    """
    payload = decode_access_token(token)

    user = db.get(User, int(payload["sub"]))
    if not user:
        logger.warning("Access token for unknown user", user_id=payload["sub"])
        raise UnauthorizedError("Invalid access token")

    return user
