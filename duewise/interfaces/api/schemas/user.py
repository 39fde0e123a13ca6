"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    email: EmailStr
    password: str = Field(..., min_length=8)


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    is_active: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["UserCreate", "UserRead"]
