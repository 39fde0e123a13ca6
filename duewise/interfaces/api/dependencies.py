"""FastAPI dependency utilities."""

import hmac

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from duewise.application.ports import PushSender
from duewise.config import get_settings
from duewise.domain.entities import User
from duewise.infrastructure.database import get_db
from duewise.infrastructure.repositories import UserRepository
from duewise.infrastructure.security import decode_access_token, password_signature
from duewise.infrastructure.web_push import PushConfigurationError, WebPushSender

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _unauthorized(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _unauthorized()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _unauthorized("User not found")

    expected_signature = password_signature(user.password, user.is_active)
    if not hmac.compare_digest(signature_claim, expected_signature):
        raise _unauthorized()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def get_push_sender() -> PushSender:
    """Return a configured :class:`WebPushSender`."""

    try:
        return WebPushSender(get_settings())
    except PushConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc


def verify_scheduler_token(
    x_scheduler_token: str | None = Header(default=None),
) -> None:
    """Require ``X-Scheduler-Token`` when a scheduler token is configured."""

    expected = get_settings().scheduler_token
    if not expected:
        return
    if x_scheduler_token is None or not hmac.compare_digest(x_scheduler_token, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid scheduler token",
        )
