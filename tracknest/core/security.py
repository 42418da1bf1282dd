# ============================================================================
# FILE: tracknest/core/security.py
# ============================================================================
from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
from jose import JWTError, jwt
from tracknest.config import settings
from tracknest.core.exceptions import Unauthorized

BCRYPT_ROUNDS = 10

def get_password_hash(password: str) -> str:
    """One-way salted hash for storage in users.password"""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a JWT carrying `data`; defaults to ACCESS_TOKEN_EXPIRE_MINUTES"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; raises Unauthorized on any failure"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise Unauthorized("Token is not valid.") from e
