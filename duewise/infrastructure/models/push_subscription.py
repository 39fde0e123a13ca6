"""SQLAlchemy model for Web Push subscriptions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from duewise.infrastructure.database import Base
from duewise.utils import now_in_app_naive_datetime


class PushSubscriptionModel(Base):
    """Push endpoint registered by one of the user's browsers."""

    __tablename__ = "push_subscription"
    __table_args__ = (
        UniqueConstraint("user_id", "endpoint", name="uq_push_subscription_user_endpoint"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    endpoint = Column(String(500), nullable=False)
    p256dh = Column(String(200), nullable=False)
    auth = Column(String(100), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["PushSubscriptionModel"]
