"""Endpoints for managing fixed accounts (recurring bills)."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from duewise.application.use_cases.fixed_accounts import (
    create_fixed_account as create_fixed_account_uc,
    delete_fixed_account as delete_fixed_account_uc,
    list_fixed_accounts as list_fixed_accounts_uc,
    update_fixed_account as update_fixed_account_uc,
)
from duewise.config import get_settings
from duewise.domain.due_dates import RoundingPolicy, annotate_due_dates
from duewise.domain.entities import FixedAccount, User
from duewise.infrastructure.database import get_db
from duewise.interfaces.api.dependencies import get_current_active_user
from duewise.interfaces.api.schemas import (
    FixedAccountCreate,
    FixedAccountRead,
    FixedAccountUpdate,
)
from duewise.utils import today_in_app_timezone

router = APIRouter(prefix="/fixed-accounts", tags=["fixed-accounts"])


def _rounding() -> RoundingPolicy:
    return RoundingPolicy(get_settings().due_day_rounding)


def _to_read_model(account: FixedAccount) -> FixedAccountRead:
    (item,) = annotate_due_dates(
        [account], today=today_in_app_timezone(), rounding=_rounding()
    )
    return FixedAccountRead.from_due(item)


@router.get("/", response_model=list[FixedAccountRead])
def list_fixed_accounts(
    include_inactive: bool = Query(
        False, description="Also return bills that were deactivated"
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[FixedAccountRead]:
    """Return the user's bills ordered by how soon they are due."""

    items = list_fixed_accounts_uc(
        db,
        user_id=current_user.id,
        include_inactive=include_inactive,
        rounding=_rounding(),
    )
    return [FixedAccountRead.from_due(item) for item in items]


@router.post("/", response_model=FixedAccountRead, status_code=status.HTTP_201_CREATED)
def create_fixed_account(
    payload: FixedAccountCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> FixedAccountRead:
    try:
        account = create_fixed_account_uc(
            db,
            user_id=current_user.id,
            name=payload.name,
            amount=payload.amount,
            due_day=payload.due_day,
            category=payload.category,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(account)


@router.patch("/{account_id}", response_model=FixedAccountRead)
def update_fixed_account(
    account_id: int,
    payload: FixedAccountUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> FixedAccountRead:
    """Edit a bill or toggle whether it is active."""

    try:
        account = update_fixed_account_uc(
            db,
            account_id,
            user_id=current_user.id,
            **payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(account)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_fixed_account(
    account_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_fixed_account_uc(db, account_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
