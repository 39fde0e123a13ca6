"""Use case for creating fixed accounts."""

from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import FixedAccount, FixedAccountCategory
from duewise.infrastructure.repositories import FixedAccountRepository

from .validators import parse_category, validate_amount, validate_due_day, validate_name


def create_fixed_account(
    session: Session,
    *,
    user_id: int,
    name: str,
    amount: Decimal,
    due_day: int,
    category: FixedAccountCategory | str = FixedAccountCategory.OTHER,
) -> FixedAccount:
    """Register a new active bill for ``user_id``."""

    account = FixedAccount(
        id=None,
        user_id=user_id,
        name=validate_name(name),
        amount=validate_amount(amount),
        due_day=validate_due_day(due_day),
        category=parse_category(category),
        is_active=True,
    )
    return FixedAccountRepository(session).create(account)
