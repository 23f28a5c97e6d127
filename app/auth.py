# app/auth.py
"""
Session checks against the external identity provider.

The provider issues signed session tokens (JWT). We only verify them and
expose a signed-in / signed-out flag plus the subject claim. Tokens are read
from the `Authorization: Bearer ...` header or the session cookie.

When AUTH_SECRET is empty (local development) every request counts as
signed in.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt

import config
from app.logging_setup import get_logger

logger = get_logger(__name__)

DEV_SUBJECT = "dev-user"


@dataclass(frozen=True)
class AuthSession:
    signed_in: bool
    subject: Optional[str] = None


SIGNED_OUT = AuthSession(signed_in=False)


def _extract_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip() or None
    return request.cookies.get(config.AUTH_COOKIE_NAME) or None


def decode_session_token(token: str) -> Optional[str]:
    """Return the token's subject, or None if it doesn't verify."""
    try:
        claims = jwt.decode(token, config.AUTH_SECRET, algorithms=[config.AUTH_ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected session token: {e}")
        return None
    subject = claims.get("sub")
    return str(subject) if subject is not None else None


def get_session(request: Request) -> AuthSession:
    """FastAPI dependency: current session, never raises."""
    if not config.AUTH_SECRET:
        return AuthSession(signed_in=True, subject=DEV_SUBJECT)

    token = _extract_token(request)
    if not token:
        return SIGNED_OUT

    subject = decode_session_token(token)
    if subject is None:
        return SIGNED_OUT
    return AuthSession(signed_in=True, subject=subject)


def require_session(session: AuthSession = Depends(get_session)) -> AuthSession:
    """FastAPI dependency for JSON endpoints: 401 when signed out."""
    if not session.signed_in:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session
