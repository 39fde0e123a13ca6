"""Endpoints for registering the browsers that receive reminders."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from duewise.application.use_cases.push_subscriptions import (
    register_push_subscription,
    remove_push_subscription,
)
from duewise.config import get_settings
from duewise.domain.entities import User
from duewise.infrastructure.database import get_db
from duewise.interfaces.api.dependencies import get_current_active_user
from duewise.interfaces.api.schemas import (
    PushSubscriptionCreate,
    PushSubscriptionRead,
    VapidPublicKeyRead,
)

router = APIRouter(prefix="/push-subscriptions", tags=["push-subscriptions"])


@router.get("/vapid-public-key", response_model=VapidPublicKeyRead)
def read_vapid_public_key() -> VapidPublicKeyRead:
    """Return the application server key browsers subscribe with."""

    public_key = get_settings().vapid_public_key
    if not public_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="VAPID public key not configured",
        )
    return VapidPublicKeyRead(public_key=public_key)


@router.put("/", response_model=PushSubscriptionRead)
def upsert_push_subscription(
    payload: PushSubscriptionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PushSubscriptionRead:
    """Save this device's subscription, replacing the keys of a known endpoint."""

    try:
        subscription = register_push_subscription(
            db,
            user_id=current_user.id,
            endpoint=payload.endpoint,
            p256dh=payload.keys.p256dh,
            auth=payload.keys.auth,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PushSubscriptionRead.model_validate(subscription)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def delete_push_subscription(
    endpoint: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Stop sending reminders to this device."""

    try:
        remove_push_subscription(db, user_id=current_user.id, endpoint=endpoint)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
