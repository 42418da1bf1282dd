# ============================================================================
# FILE: tracknest/schemas/user.py
# ============================================================================
from pydantic import EmailStr, field_validator, validate_email
from pydantic_core import PydanticCustomError
from typing import Optional
from tracknest.schemas.base import CamelModel

class UserCreate(CamelModel):
    """Schema for user registration"""
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    bio: Optional[str] = None

class UserLogin(CamelModel):
    """Schema for user login"""
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: Optional[str]) -> Optional[str]:
        """Same normalized form EmailStr stores at registration; malformed input is left to fail the lookup"""
        if not value:
            return value
        try:
            return validate_email(value)[1]
        except PydanticCustomError:
            return value

class UserResponse(CamelModel):
    """Schema for the caller's own profile"""
    username: str
    email: str
    bio: Optional[str] = None

class PublicUserResponse(CamelModel):
    """Schema for a profile viewed by anyone"""
    username: str
    bio: Optional[str] = None

class LoginResponse(CamelModel):
    """Schema for a successful login"""
    token: str
    user: UserResponse
    message: str

class BioUpdate(CamelModel):
    bio: Optional[str] = None

class PasswordChange(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
    confirm_new_password: Optional[str] = None

class MessageResponse(CamelModel):
    message: str
