"""
JWT helpers and the auth dependencies used by the routes
"""

import logging
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import PyJWTError
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import UnauthorizedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_token(user: Dict[str, Any]) -> str:
    """Sign a token for ``user`` carrying its username and admin flag"""
    payload = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the token payload, or None if the token does not verify"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except PyJWTError:
        logger.debug("Ignoring invalid bearer token", exc_info=True)
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Dict[str, Any]]:
    """Resolve the caller from an ``Authorization: Bearer`` header.

    A missing or invalid token means an anonymous caller, not an error;
    the ``ensure_*`` dependencies decide whether that is acceptable.
    """
    if credentials is None:
        return None
    return decode_token(credentials.credentials)


async def ensure_logged_in(
    user: Optional[Dict[str, Any]] = Depends(get_current_user),
) -> Dict[str, Any]:
    if not user:
        raise UnauthorizedError()
    return user


async def ensure_admin(
    user: Optional[Dict[str, Any]] = Depends(get_current_user),
) -> Dict[str, Any]:
    if not user or not user.get("isAdmin"):
        raise UnauthorizedError()
    return user
