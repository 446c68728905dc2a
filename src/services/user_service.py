"""User use cases: registration and lookup by email or id."""

import logging

from domain.model.errors import ConflictError, ValidationError
from domain.model.user import CreateUserData, User
from domain.model.validation import is_blank, validate_email
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUser:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self, data: CreateUserData) -> User:
        """Register a new user under the normalized email.

        Raises:
            ValidationError: email missing or malformed
            ConflictError: email already registered (case/whitespace-insensitive)
        """
        email = validate_email(data.email)

        if self.repo.find_by_email(email):
            raise ConflictError(f"Email {email} is already in use")

        # The repository rejects a concurrent duplicate via the unique index.
        user = self.repo.create(User.create(email))
        logger.info("User registered", extra={"userId": user.id, "email": user.email})
        return user


class FindUser:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def find_by_email(self, email: str | None) -> User | None:
        """Look up a user by email. Absence is None, not an error."""
        return self.repo.find_by_email(validate_email(email))

    def find_by_id(self, user_id: str | None) -> User | None:
        """Look up a user by id. Absence is None, not an error."""
        if is_blank(user_id):
            raise ValidationError("User ID is required")
        return self.repo.find_by_id(user_id)

    def execute(self, email: str | None) -> User | None:
        return self.find_by_email(email)
