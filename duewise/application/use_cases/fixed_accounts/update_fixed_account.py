"""Use case for editing a fixed account, including (de)activation."""

from dataclasses import replace
from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import FixedAccount, FixedAccountCategory
from duewise.infrastructure.repositories import FixedAccountRepository

from .get_fixed_account import get_fixed_account
from .validators import parse_category, validate_amount, validate_due_day, validate_name


def update_fixed_account(
    session: Session,
    account_id: int,
    *,
    user_id: int,
    name: str | None = None,
    amount: Decimal | None = None,
    due_day: int | None = None,
    category: FixedAccountCategory | str | None = None,
    is_active: bool | None = None,
) -> FixedAccount:
    """Apply the provided changes to the bill ``account_id`` of ``user_id``."""

    account = get_fixed_account(session, account_id, user_id=user_id)
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = validate_name(name)
    if amount is not None:
        changes["amount"] = validate_amount(amount)
    if due_day is not None:
        changes["due_day"] = validate_due_day(due_day)
    if category is not None:
        changes["category"] = parse_category(category)
    if is_active is not None:
        changes["is_active"] = is_active

    if not changes:
        return account
    return FixedAccountRepository(session).update(replace(account, **changes))
