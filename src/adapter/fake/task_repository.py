"""In-memory implementation of TaskRepository for testing."""

import uuid
from dataclasses import replace

from domain.model.errors import TaskNotFoundError
from domain.model.task import Task


class FakeTaskRepository:
    def __init__(self):
        self.store: dict[str, Task] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, task: Task) -> Task:
        task_id = task.id or uuid.uuid4().hex
        stored = replace(task, id=task_id)
        self.store[task_id] = stored
        return replace(stored)

    def update(self, task_id: str, changes: dict) -> Task:
        task = self.store.get(task_id)
        if not task:
            raise TaskNotFoundError(task_id)

        allowed = {k: v for k, v in changes.items() if k not in Task.IMMUTABLE_FIELDS}
        updated = replace(task, **allowed)
        self.store[task_id] = updated
        return replace(updated)

    def delete(self, task_id: str) -> None:
        if task_id not in self.store:
            raise TaskNotFoundError(task_id)
        del self.store[task_id]

    # ── read operations ──────────────────────────────────────

    def find_all(self, user_id: str) -> list[Task]:
        results = [replace(t) for t in self.store.values() if t.user_id == user_id]
        results.sort(key=lambda t: t.created_at, reverse=True)
        return results

    def find_by_id(self, task_id: str) -> Task | None:
        task = self.store.get(task_id)
        return replace(task) if task else None
