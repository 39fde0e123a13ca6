"""Persistence helpers for wallet transactions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import Transaction, TransactionType, parse_transaction_category
from duewise.infrastructure.models import TransactionModel
from duewise.utils import ensure_app_naive_datetime, ensure_app_timezone


class TransactionRepository:
    """Provide CRUD operations for :class:`Transaction` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self, user_id: int, *, limit: int | None = 50
    ) -> Sequence[Transaction]:
        query = (
            self.session.query(TransactionModel)
            .filter(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.date.desc(), TransactionModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_since(self, user_id: int, since: datetime) -> Sequence[Transaction]:
        """Return the user's transactions dated at or after ``since``."""

        query = (
            self.session.query(TransactionModel)
            .filter(TransactionModel.user_id == user_id)
            .filter(TransactionModel.date >= ensure_app_naive_datetime(since))
            .order_by(TransactionModel.date, TransactionModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, transaction_id: int) -> Transaction | None:
        model = self.session.get(TransactionModel, transaction_id)
        return self._to_entity(model) if model else None

    def create(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(user_id=transaction.user_id)
        self._apply_entity_to_model(model, transaction)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, transaction: Transaction) -> Transaction:
        if transaction.id is None:
            raise ValueError("Transaction id is required for updates")
        model = self.session.get(TransactionModel, transaction.id)
        if model is None:
            msg = f"Transaction with id {transaction.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, transaction)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, transaction_id: int) -> None:
        model = self.session.get(TransactionModel, transaction_id)
        if model is None:
            msg = f"Transaction with id {transaction_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: TransactionModel, transaction: Transaction) -> None:
        model.name = transaction.name
        model.amount = transaction.amount
        model.type = TransactionType(transaction.type).value
        model.category = parse_transaction_category(
            transaction.type, transaction.category
        ).value
        model.date = ensure_app_naive_datetime(transaction.date)

    @staticmethod
    def _to_entity(model: TransactionModel) -> Transaction:
        kind = TransactionType(model.type)
        return Transaction(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            amount=Decimal(model.amount),
            type=kind,
            category=parse_transaction_category(kind, model.category),
            date=ensure_app_timezone(model.date),
        )


__all__ = ["TransactionRepository"]
