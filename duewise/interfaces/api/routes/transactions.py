"""Endpoints for wallet transactions and balances."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from duewise.application.use_cases.transactions import (
    create_transaction as create_transaction_uc,
    delete_transaction as delete_transaction_uc,
    get_period_balance,
    list_transactions as list_transactions_uc,
    update_transaction as update_transaction_uc,
)
from duewise.domain.entities import Transaction, User
from duewise.infrastructure.database import get_db
from duewise.interfaces.api.dependencies import get_current_active_user
from duewise.interfaces.api.schemas import (
    PeriodBalanceRead,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _to_read_model(transaction: Transaction) -> TransactionRead:
    return TransactionRead(
        id=transaction.id or 0,
        name=transaction.name,
        amount=transaction.amount,
        type=transaction.type,
        category=transaction.category.value,
        date=transaction.date,
    )


@router.get("/", response_model=list[TransactionRead])
def list_transactions(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[TransactionRead]:
    """Return the most recent transactions, newest first."""

    transactions = list_transactions_uc(db, user_id=current_user.id, limit=limit)
    return [_to_read_model(transaction) for transaction in transactions]


@router.get("/balance", response_model=PeriodBalanceRead)
def read_balance(
    days: int = Query(1, ge=1, le=366, description="Trailing window, today included"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PeriodBalanceRead:
    """Return incomes minus expenses over the last ``days`` days."""

    balance = get_period_balance(db, user_id=current_user.id, days=days)
    return PeriodBalanceRead.model_validate(balance)


@router.post("/", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> TransactionRead:
    try:
        transaction = create_transaction_uc(
            db,
            user_id=current_user.id,
            name=payload.name,
            amount=payload.amount,
            type=payload.type,
            category=payload.category,
            date=payload.date,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(transaction)


@router.put("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> TransactionRead:
    try:
        transaction = update_transaction_uc(
            db,
            transaction_id,
            user_id=current_user.id,
            **payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        detail = str(exc)
        code = (
            status.HTTP_404_NOT_FOUND
            if detail == "Transaction not found"
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=detail) from exc
    return _to_read_model(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_transaction_uc(db, transaction_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
