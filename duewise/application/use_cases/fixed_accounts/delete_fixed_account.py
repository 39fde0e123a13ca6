"""Use case for deleting fixed accounts."""

from sqlalchemy.orm import Session

from duewise.infrastructure.repositories import FixedAccountRepository

from .get_fixed_account import get_fixed_account


def delete_fixed_account(session: Session, account_id: int, *, user_id: int) -> None:
    """Permanently delete the bill ``account_id`` of ``user_id``."""

    get_fixed_account(session, account_id, user_id=user_id)
    FixedAccountRepository(session).delete(account_id)
