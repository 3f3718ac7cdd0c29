"""User repository."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query

from src.models.user import User
from src.repositories.base import Repository

logger = logging.getLogger(__name__)


class UserAlreadyExistsError(Exception):
    """Raised when an email or username is already taken."""


class UserRepository(Repository[User, User]):
    """Registered users. Records are the ORM objects themselves."""

    model = User

    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        return query.filter(User.id == owner_id)

    def _shape(self, row: User) -> User:
        return row

    def create(self, email: str, username: str, password_hash: str) -> User:
        """Insert a user; email and username must both be unused."""
        user = User(email=email, username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError(f"User {email} / {username} already exists") from e
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_email_or_username(self, email: str, username: str) -> User | None:
        """Get a user matching either the email or the username."""
        return (
            self.db.query(User)
            .filter(or_(User.email == email, User.username == username))
            .first()
        )

    def find_many(self, limit: int = 100) -> list[User]:
        return self.db.query(User).order_by(User.id).limit(limit).all()

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> User | None:
        allowed = {
            name: value
            for name, value in fields.items()
            if name in ("email", "username", "password_hash")
        }
        try:
            return super().update(entity_id, allowed, owner_id)
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError("Email or username already taken") from e

    def count(self) -> int:
        return self.db.query(User).count()
