"""SQLAlchemy model for recurring bills."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)

from duewise.infrastructure.database import Base
from duewise.utils import now_in_app_naive_datetime


class FixedAccountModel(Base):
    """Database representation of a fixed account (monthly bill)."""

    __tablename__ = "fixed_account"
    __table_args__ = (
        CheckConstraint("due_day BETWEEN 1 AND 31", name="ck_fixed_account_due_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(120), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String(30), nullable=False, default="other")
    due_day = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["FixedAccountModel"]
