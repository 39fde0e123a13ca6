"""Use case for registering users."""

from sqlalchemy.orm import Session

from duewise.domain.entities import User
from duewise.infrastructure.repositories import UserRepository
from duewise.infrastructure.security import get_password_hash


def create_user(session: Session, *, name: str, email: str, password: str) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        msg = "Email is already registered"
        raise ValueError(msg)

    user = User(
        id=None,
        name=name.strip(),
        email=email,
        password=get_password_hash(password),
        is_active=True,
    )
    return repository.create(user)
