"""Persistence helpers for fixed account entities."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from duewise.domain.entities import FixedAccount, FixedAccountCategory
from duewise.infrastructure.models import FixedAccountModel
from duewise.utils import ensure_app_timezone


class FixedAccountRepository:
    """Provide CRUD operations for :class:`FixedAccount` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active(self) -> Sequence[FixedAccount]:
        """Return every active bill across all users."""

        query = (
            self.session.query(FixedAccountModel)
            .filter(FixedAccountModel.is_active.is_(True))
            .order_by(FixedAccountModel.user_id, FixedAccountModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(
        self, user_id: int, *, include_inactive: bool = False
    ) -> Sequence[FixedAccount]:
        query = self.session.query(FixedAccountModel).filter(
            FixedAccountModel.user_id == user_id
        )
        if not include_inactive:
            query = query.filter(FixedAccountModel.is_active.is_(True))
        query = query.order_by(FixedAccountModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, account_id: int) -> FixedAccount | None:
        model = self.session.get(FixedAccountModel, account_id)
        return self._to_entity(model) if model else None

    def create(self, account: FixedAccount) -> FixedAccount:
        model = FixedAccountModel(user_id=account.user_id)
        self._apply_entity_to_model(model, account)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, account: FixedAccount) -> FixedAccount:
        if account.id is None:
            raise ValueError("Fixed account id is required for updates")
        model = self.session.get(FixedAccountModel, account.id)
        if model is None:
            msg = f"Fixed account with id {account.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, account)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, account_id: int) -> None:
        model = self.session.get(FixedAccountModel, account_id)
        if model is None:
            msg = f"Fixed account with id {account_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: FixedAccountModel, account: FixedAccount) -> None:
        model.name = account.name
        model.amount = account.amount
        model.category = FixedAccountCategory(account.category).value
        model.due_day = account.due_day
        model.is_active = account.is_active

    @staticmethod
    def _to_entity(model: FixedAccountModel) -> FixedAccount:
        return FixedAccount(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            amount=Decimal(model.amount),
            due_day=model.due_day,
            category=FixedAccountCategory(model.category),
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["FixedAccountRepository"]
