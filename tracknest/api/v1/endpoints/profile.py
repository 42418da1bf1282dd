# ============================================================================
# FILE: tracknest/api/v1/endpoints/profile.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tracknest.db.session import get_db
from tracknest.api.dependencies import require_current_user
from tracknest.schemas.user import UserResponse, BioUpdate, PasswordChange, MessageResponse
from tracknest.services.user_service import user_service
from tracknest.core.exceptions import TrackNestError, BadRequest, ServerError
from tracknest.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/profile", response_model=UserResponse)
async def get_profile(
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return current_user

@router.put("/profile/bio", response_model=MessageResponse)
async def update_bio(
    payload: BioUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Overwrite the current user's bio"""
    try:
        user_service.update_bio(db, current_user, payload.bio)
    except Exception as e:
        logger.error(f"Update bio error: {e}")
        raise ServerError("Server error while updating bio. Please try again later.")
    return {"message": "Bio updated successfully."}

@router.put("/profile/password", response_model=MessageResponse)
async def change_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Change the current user's password
    The token in use stays valid; the client is expected to log in again
    """
    if not payload.current_password or not payload.new_password or not payload.confirm_new_password:
        raise BadRequest("Please provide all required fields.")

    try:
        user_service.change_password(
            db,
            current_user,
            payload.current_password,
            payload.new_password,
            payload.confirm_new_password,
        )
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Change password error: {e}")
        raise ServerError("Server error while changing password. Please try again later.")

    return {"message": "Password updated successfully. Please log in with your new password."}

@router.delete("/profile", response_model=MessageResponse)
async def delete_account(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Delete the current user's account, playlists and likes"""
    try:
        user_service.delete_user(db, current_user)
    except Exception as e:
        logger.error(f"Delete account error: {e}")
        raise ServerError("Server error while deleting account. Please try again later.")
    return {"message": "Your account has been deleted successfully."}
