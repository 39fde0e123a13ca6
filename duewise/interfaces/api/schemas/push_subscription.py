"""Pydantic models describing push subscription payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PushSubscriptionKeys(BaseModel):
    p256dh: str = Field(..., min_length=1)
    auth: str = Field(..., min_length=1)


class PushSubscriptionCreate(BaseModel):
    """Shape produced by ``PushSubscription.toJSON()`` in the browser."""

    endpoint: str = Field(..., min_length=1, max_length=500)
    keys: PushSubscriptionKeys


class PushSubscriptionRead(BaseModel):
    id: int
    endpoint: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class VapidPublicKeyRead(BaseModel):
    public_key: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


__all__ = [
    "PushSubscriptionCreate",
    "PushSubscriptionKeys",
    "PushSubscriptionRead",
    "VapidPublicKeyRead",
]
