"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from duewise.infrastructure.database import Base
from duewise.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    fixed_account_id = Column(
        Integer,
        ForeignKey("fixed_account.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    # Only set when daily deduplication is enabled; NULLs never collide.
    reminder_key = Column(String(40), nullable=True, unique=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
