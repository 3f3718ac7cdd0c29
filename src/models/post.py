"""Post model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Post(Base, TimestampMixin):
    """Blog post written by a user."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    published = Column(Boolean, default=False, server_default=false(), nullable=False)
    author_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    author = relationship("User", back_populates="posts")
