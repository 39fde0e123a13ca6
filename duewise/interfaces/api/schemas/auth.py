"""Authentication schemas."""

from pydantic import BaseModel


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


__all__ = ["Token"]
