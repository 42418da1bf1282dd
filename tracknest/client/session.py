# ============================================================================
# FILE: tracknest/client/session.py
# ============================================================================
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict
from jose import jwt, JWTError
from tracknest.config import settings
import logging

logger = logging.getLogger(__name__)

@dataclass
class SessionContext:
    """
    Client-side login state handed explicitly to every API call.

    The token is opaque to the client except for its `exp` claim, which is
    read without verifying the signature so an expired session is dropped
    before any request goes out.
    """
    token: Optional[str] = None
    user: Dict = field(default_factory=dict)
    expires_at: Optional[datetime] = None

    @classmethod
    def from_login(cls, payload: Dict) -> "SessionContext":
        """Build a session from a /login response body"""
        token = payload["token"]
        return cls(token=token, user=payload.get("user") or {}, expires_at=_token_expiry(token))

    @property
    def username(self) -> Optional[str]:
        return self.user.get("username")

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= self.expires_at

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and not self.is_expired()

    def auth_headers(self) -> Dict[str, str]:
        """Header carrying the token, or nothing for anonymous/expired sessions"""
        if not self.is_authenticated:
            return {}
        return {settings.AUTH_HEADER: self.token}

    def clear(self):
        """Forget the credential (logout, password change, account deletion)"""
        self.token = None
        self.user = {}
        self.expires_at = None

def _token_expiry(token: str) -> Optional[datetime]:
    try:
        exp = jwt.get_unverified_claims(token).get("exp")
    except JWTError as e:
        logger.warning(f"Could not read token expiry: {e}")
        return None
    if exp is None:
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)
