# teamhub/core/security.py
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from teamhub.core.config import settings
from teamhub.core.exceptions import UnauthorizedError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted hash of a plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def _encode(claims: Dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload.update({
        # Unique per token so two pairs minted in the same second never collide
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    })
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def _decode(token: str, secret: str, token_type: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthorizedError(f"Invalid {token_type} token") from e

    if payload.get("type") != token_type or not payload.get("sub"):
        raise UnauthorizedError(f"Invalid {token_type} token")
    return payload


def create_access_token(user) -> str:
    """
    Create a short-lived access token for a user.
    Carries the user id as subject plus the basic profile fields.
    """
    claims = {
        "sub": str(user.id),
        "type": ACCESS_TOKEN_TYPE,
        "username": user.username,
        "email": user.email,
        "fullname": user.fullname,
    }
    return _encode(
        claims,
        settings.ACCESS_TOKEN_SECRET,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(user) -> str:
    """
    Create a long-lived refresh token, signed with its own secret so it
    can be verified independently of the access token secret.
    """
    claims = {"sub": str(user.id), "type": REFRESH_TOKEN_TYPE}
    return _encode(
        claims,
        settings.REFRESH_TOKEN_SECRET,
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    )


def decode_access_token(token: str) -> Dict[str, Any]:
    return _decode(token, settings.ACCESS_TOKEN_SECRET, ACCESS_TOKEN_TYPE)


def decode_refresh_token(token: str) -> Dict[str, Any]:
    return _decode(token, settings.REFRESH_TOKEN_SECRET, REFRESH_TOKEN_TYPE)
