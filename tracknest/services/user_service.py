# ============================================================================
# FILE: tracknest/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session
from tracknest.db.models.user import User
from tracknest.schemas.user import UserCreate
from tracknest.core.exceptions import InvalidCredentials, BadRequest
from tracknest.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account"""
        try:
            user = User(
                username=user_data.username,
                email=user_data.email,
                password=get_password_hash(user_data.password),
                bio=user_data.bio or None,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.username}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = self.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user

    def update_bio(self, db: Session, user: User, bio: Optional[str]) -> User:
        """Overwrite the user's bio"""
        try:
            user.bio = bio
            db.commit()
            db.refresh(user)
            logger.info(f"Bio updated: {user.username}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating bio: {e}")
            raise

    def change_password(
        self, db: Session, user: User, current_password: str, new_password: str, confirm_new_password: str
    ) -> None:
        """
        Replace the stored hash after verifying the current password.
        Existing tokens stay valid until they expire; clients drop theirs.
        """
        if new_password != confirm_new_password:
            raise BadRequest("New passwords do not match.")
        if not verify_password(current_password, user.password):
            raise InvalidCredentials("Current password is incorrect.")

        try:
            user.password = get_password_hash(new_password)
            db.commit()
            logger.info(f"Password changed: {user.username}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error changing password: {e}")
            raise

    def delete_user(self, db: Session, user: User) -> None:
        """Delete the account together with its playlists, inclusions and likes"""
        try:
            username = user.username
            db.delete(user)
            db.commit()
            logger.info(f"User deleted: {username}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting user: {e}")
            raise

# Create singleton instance
user_service = UserService()
