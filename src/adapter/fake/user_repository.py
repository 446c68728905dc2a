"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace

from domain.model.errors import ConflictError
from domain.model.user import User
from domain.model.validation import normalize_email


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        email = normalize_email(user.email)
        # mirrors the unique email index of the MongoDB adapter
        if any(u.email == email for u in self.store.values()):
            raise ConflictError(f"Email {email} is already in use")

        user_id = user.id or uuid.uuid4().hex
        stored = replace(user, id=user_id, email=email)
        self.store[user_id] = stored
        return replace(stored)

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        email = normalize_email(email)
        for user in self.store.values():
            if user.email == email:
                return replace(user)
        return None

    def find_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None
