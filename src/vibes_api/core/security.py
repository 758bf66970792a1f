"""Requester identity resolved from a bearer access token."""

from __future__ import annotations

import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vibes_api.core.config import Settings, get_settings
from vibes_api.core.errors import AuthError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"

_bearer = HTTPBearer(auto_error=False)


def decode_requester_id(token: str, settings: Settings) -> int:
    """Return the ``user_id`` claim of a valid access token.

    Raises:
        AuthError: Signature, expiry or claim shape is wrong.
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as exc:
        logger.warning("Token verification failed: %s", exc)
        raise AuthError("Invalid or expired token") from None

    if claims.get("type") != ACCESS_TOKEN_TYPE:
        raise AuthError("Invalid token type")

    user_id = claims.get("user_id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise AuthError("Invalid or expired token")
    return user_id


def create_access_token(user_id: int, settings: Settings) -> str:
    return jwt.encode(
        {"user_id": user_id, "type": ACCESS_TOKEN_TYPE},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def require_requester(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> int:
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token is required")
    return decode_requester_id(credentials.credentials, settings)


def optional_requester(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> int | None:
    if credentials is None or not credentials.credentials:
        return None
    try:
        return decode_requester_id(credentials.credentials, settings)
    except AuthError:
        return None
