from dataclasses import dataclass
from datetime import datetime, timezone

from domain.model.errors import ForbiddenError


# ── Input records ────────────────────────────────────────


@dataclass(frozen=True)
class CreateTaskData:
    """Fields supplied by the caller to create a task."""
    user_id: str | None
    title: str | None
    description: str | None


@dataclass(frozen=True)
class UpdateTaskData:
    """Partial update. A field left as None is not touched."""
    title: str | None = None
    description: str | None = None
    completed: bool | None = None

    def changes(self) -> dict:
        """Return only the fields that were supplied."""
        fields = {
            'title': self.title,
            'description': self.description,
            'completed': self.completed,
        }
        return {k: v for k, v in fields.items() if v is not None}

    @property
    def is_empty(self) -> bool:
        return not self.changes()


# ── Task Domain Model ────────────────────────────────────


@dataclass
class Task:
    """Domain model representing a to-do item owned by one user."""

    # Write-once fields; updates never touch these.
    IMMUTABLE_FIELDS = ('id', 'user_id', 'created_at')

    user_id: str
    title: str
    description: str
    completed: bool
    created_at: datetime
    id: str | None = None

    @staticmethod
    def create(user_id: str, title: str, description: str) -> 'Task':
        """Create a new, not yet persisted, incomplete Task."""
        return Task(
            user_id=user_id,
            title=title,
            description=description,
            completed=False,
            created_at=datetime.now(timezone.utc),
        )

    def is_owned_by(self, user_id: str | None) -> bool:
        return self.user_id == user_id

    def check_ownership(self, user_id: str | None, action: str = 'access') -> None:
        """Verify ownership. Raises ForbiddenError on mismatch."""
        if not self.is_owned_by(user_id):
            raise ForbiddenError(f"You don't have permission to {action} this task")
