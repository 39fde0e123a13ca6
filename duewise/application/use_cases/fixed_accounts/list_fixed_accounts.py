"""Use case for listing fixed accounts ordered by proximity of their due date."""

from datetime import date

from sqlalchemy.orm import Session

from duewise.domain.due_dates import FixedAccountDue, RoundingPolicy, sort_by_due_date
from duewise.domain.entities import FixedAccount
from duewise.infrastructure.repositories import FixedAccountRepository
from duewise.utils import today_in_app_timezone


def list_fixed_accounts(
    session: Session,
    *,
    user_id: int,
    include_inactive: bool = False,
    today: date | None = None,
    rounding: RoundingPolicy = RoundingPolicy.CEIL,
) -> list[FixedAccountDue[FixedAccount]]:
    """Return the bills of ``user_id`` sorted by days until due.

    Bills due on the same day keep their creation order.
    """

    accounts = FixedAccountRepository(session).list_for_user(
        user_id, include_inactive=include_inactive
    )
    return sort_by_due_date(
        accounts, today=today or today_in_app_timezone(), rounding=rounding
    )
