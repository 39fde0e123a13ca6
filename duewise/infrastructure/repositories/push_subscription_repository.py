"""Persistence helpers for Web Push subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from duewise.domain.entities import PushSubscription
from duewise.infrastructure.models import PushSubscriptionModel
from duewise.utils import ensure_app_timezone


class PushSubscriptionRepository:
    """Store the push endpoints registered by each user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[PushSubscription]:
        query = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.user_id == user_id)
            .order_by(PushSubscriptionModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def upsert(self, subscription: PushSubscription) -> PushSubscription:
        """Insert ``subscription`` or refresh the keys of the existing endpoint."""

        model = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.user_id == subscription.user_id)
            .filter(PushSubscriptionModel.endpoint == subscription.endpoint)
            .first()
        )
        if model is None:
            model = PushSubscriptionModel(
                user_id=subscription.user_id, endpoint=subscription.endpoint
            )
        model.p256dh = subscription.p256dh
        model.auth = subscription.auth
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, *, user_id: int, endpoint: str) -> bool:
        """Remove the subscription; return ``False`` when it did not exist."""

        deleted = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.user_id == user_id)
            .filter(PushSubscriptionModel.endpoint == endpoint)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return bool(deleted)

    @staticmethod
    def _to_entity(model: PushSubscriptionModel) -> PushSubscription:
        return PushSubscription(
            id=model.id,
            user_id=model.user_id,
            endpoint=model.endpoint,
            p256dh=model.p256dh,
            auth=model.auth,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["PushSubscriptionRepository"]
