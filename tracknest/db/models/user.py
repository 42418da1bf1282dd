
# ============================================================================
# FILE: tracknest/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from tracknest.db.base import Base

class User(Base):
    """User account; the username is the natural key used everywhere"""
    __tablename__ = "users"

    username = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    bio = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    playlists = relationship(
        "Playlist", back_populates="user", cascade="all, delete-orphan"
    )
    likes = relationship(
        "UserLike", back_populates="user", cascade="all, delete-orphan"
    )
