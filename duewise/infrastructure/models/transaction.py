"""SQLAlchemy model for wallet transactions."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String

from duewise.infrastructure.database import Base


class TransactionModel(Base):
    """Database representation of an income or expense."""

    __tablename__ = "wallet_transaction"
    __table_args__ = (Index("ix_wallet_transaction_user_date", "user_id", "date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(120), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(String(10), nullable=False)
    category = Column(String(30), nullable=False)
    date = Column(DateTime(), nullable=False)


__all__ = ["TransactionModel"]
