# ============================================================================
# FILE: tracknest/api/v1/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from tracknest.db.session import get_db
from tracknest.schemas.user import (
    UserCreate,
    UserLogin,
    LoginResponse,
    PublicUserResponse,
    MessageResponse
)
from tracknest.services.user_service import user_service
from tracknest.core.security import create_access_token
from tracknest.core.exceptions import TrackNestError, BadRequest, Conflict, InvalidCredentials, NotFound, ServerError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    Does not log the user in
    """
    if not user_data.username or not user_data.email or not user_data.password:
        raise BadRequest("Please provide username, email, and password.")

    try:
        # Check if username already exists
        if user_service.get_user_by_username(db, user_data.username):
            raise Conflict("Username already taken. Please choose another one.")

        # Check if email already exists
        if user_service.get_user_by_email(db, user_data.email):
            raise Conflict("Email already registered. Please use a different email.")

        user_service.create_user(db, user_data)
        return {"message": "User registered successfully. You can now log in."}
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Signup error: {e}")
        raise ServerError("Server error during registration. Please try again later.")

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Login with email and password
    Returns a signed token plus the public profile fields
    """
    if not credentials.email or not credentials.password:
        raise BadRequest("Please provide email and password.")

    try:
        user = user_service.authenticate_user(db, credentials.email, credentials.password)
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise ServerError("Server error during login. Please try again later.")

    # Same message for unknown email and wrong password
    if not user:
        raise InvalidCredentials("Invalid email or password.")

    token = create_access_token(data={"sub": user.username, "email": user.email})
    logger.info(f"User logged in: {user.username}")

    return {
        "token": token,
        "user": {"username": user.username, "email": user.email, "bio": user.bio},
        "message": "Login successful.",
    }

@router.get("/users/{username}/profile", response_model=PublicUserResponse)
async def get_public_profile(
    username: str,
    db: Session = Depends(get_db)
):
    """
    Get public profile information of any user
    Email is never exposed here
    """
    try:
        user = user_service.get_user_by_username(db, username)
    except Exception as e:
        logger.error(f"Error fetching user profile: {e}")
        raise ServerError("Server error while fetching user profile. Please try again later.")

    if not user:
        raise NotFound("User not found.")
    return user
