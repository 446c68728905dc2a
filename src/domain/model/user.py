from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class CreateUserData:
    """Fields supplied by the caller to register a user."""
    email: str | None


@dataclass
class User:
    """Domain model representing a user."""
    email: str
    created_at: datetime
    id: str | None = None

    @staticmethod
    def create(email: str) -> 'User':
        """Create a new, not yet persisted, User. Email must already be normalized."""
        return User(email=email, created_at=datetime.now(timezone.utc))


@dataclass(frozen=True)
class AuthenticatedUser:
    """Caller identity attached to a request once authentication succeeds."""
    id: str
    email: str
