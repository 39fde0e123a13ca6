"""Use case for retrieving a single fixed account."""

from sqlalchemy.orm import Session

from duewise.domain.entities import FixedAccount
from duewise.infrastructure.repositories import FixedAccountRepository


def get_fixed_account(session: Session, account_id: int, *, user_id: int) -> FixedAccount:
    """Return the bill ``account_id`` if it belongs to ``user_id``.

    Bills owned by someone else are reported as missing.
    """

    account = FixedAccountRepository(session).get(account_id)
    if account is None or account.user_id != user_id:
        raise ValueError("Fixed account not found")
    return account
