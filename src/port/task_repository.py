"""Port definition for TaskRepository."""

from typing import Protocol

from domain.model.task import Task


class TaskRepository(Protocol):
    """Protocol defining the interface for task data access."""

    def find_all(self, user_id: str) -> list[Task]:
        """Return all tasks owned by user_id, newest created_at first."""
        ...

    def find_by_id(self, task_id: str) -> Task | None:
        """Find a task by ID. Return Task or None if not found."""
        ...

    def create(self, task: Task) -> Task:
        """Persist a new task, assigning an id if absent. Return the stored Task."""
        ...

    def update(self, task_id: str, changes: dict) -> Task:
        """Apply changes and return the task as stored afterwards.

        id, user_id and created_at in changes are ignored.
        Raises TaskNotFoundError if the task does not exist.
        """
        ...

    def delete(self, task_id: str) -> None:
        """Delete a task. Raises TaskNotFoundError if the task does not exist."""
        ...
