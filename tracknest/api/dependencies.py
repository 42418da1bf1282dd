# ============================================================================
# FILE: tracknest/api/dependencies.py
# ============================================================================
from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session
from tracknest.db.session import get_db
from tracknest.core.security import decode_access_token
from tracknest.core.exceptions import Unauthorized
from tracknest.db.models.user import User
from tracknest.config import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)

token_header = APIKeyHeader(name=settings.AUTH_HEADER, auto_error=False)

def _resolve_user(token: str, db: Session) -> User:
    """Decode the token and load its user; raises Unauthorized on any failure"""
    payload = decode_access_token(token)
    username: str = payload.get("sub")
    if username is None:
        raise Unauthorized("Token is not valid.")

    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise Unauthorized("Token is not valid.")
    return user

def get_current_user(
    token: Optional[str] = Depends(token_header),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get current authenticated user from the token header
    Returns None if no token or invalid token (allows anonymous access)
    """
    if not token:
        return None

    try:
        return _resolve_user(token, db)
    except Unauthorized as e:
        logger.warning(f"Ignoring invalid token on optional-auth route: {e.detail}")
        return None

def require_current_user(
    token: Optional[str] = Depends(token_header),
    db: Session = Depends(get_db)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if not token:
        raise Unauthorized("No token, authorization denied.")
    return _resolve_user(token, db)
