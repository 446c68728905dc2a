"""Task use cases: create, list, fetch, update and delete a user's tasks.

Pure business logic with no HTTP dependencies. Each use case holds the
repository it works against and raises domain errors that route handlers
map to HTTP status codes. Validation always runs before any write.
"""

import logging

from domain.model.errors import TaskNotFoundError, ValidationError
from domain.model.task import CreateTaskData, Task, UpdateTaskData
from domain.model.validation import (
    is_blank,
    validate_description,
    validate_title,
    validate_user_id,
)
from port.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class CreateTask:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def execute(self, data: CreateTaskData) -> Task:
        """Create an incomplete task for data.user_id.

        Rules are checked in order: user id, title, description.

        Raises:
            ValidationError: first violated rule
        """
        validate_user_id(data.user_id)
        title = validate_title(data.title)
        description = validate_description(data.description)

        task = self.repo.create(Task.create(data.user_id, title, description))
        logger.info("Task created", extra={"taskId": task.id, "userId": task.user_id})
        return task


class GetTasks:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def execute(self, user_id: str | None) -> list[Task]:
        """Return all of a user's tasks, most recently created first."""
        validate_user_id(user_id)
        return self.repo.find_all(user_id)

    def execute_get_by_id_with_auth(self, task_id: str | None, user_id: str | None) -> Task | None:
        """Fetch one task on behalf of user_id.

        Returns None when the task does not exist.

        Raises:
            ValidationError: either id is blank
            ForbiddenError: task exists but belongs to someone else
        """
        if is_blank(task_id) or is_blank(user_id):
            raise ValidationError("Task ID and user ID are required")

        task = self.repo.find_by_id(task_id)
        if task:
            task.check_ownership(user_id, 'access')
        return task


class UpdateTask:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def execute_with_auth(self, task_id: str, user_id: str | None, data: UpdateTaskData) -> Task:
        """Apply a partial update to a task owned by user_id.

        Returns the task as stored after the update.

        Raises:
            TaskNotFoundError: task does not exist
            ForbiddenError: task belongs to someone else
            ValidationError: a supplied field is invalid
        """
        existing = self.repo.find_by_id(task_id)
        if not existing:
            raise TaskNotFoundError(task_id)

        existing.check_ownership(user_id, 'update')

        changes = self._validate_changes(data)
        task = self.repo.update(task_id, changes)

        logger.info("Task updated", extra={"taskId": task_id, "userId": user_id, "fields": sorted(changes)})
        return task

    @staticmethod
    def _validate_changes(data: UpdateTaskData) -> dict:
        changes = data.changes()
        if 'title' in changes:
            changes['title'] = validate_title(changes['title'], required=False)
        if 'description' in changes:
            changes['description'] = validate_description(changes['description'], required=False)
        return changes


class DeleteTask:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def execute_with_auth(self, task_id: str, user_id: str | None) -> None:
        """Delete a task owned by user_id.

        Raises:
            TaskNotFoundError: task does not exist (including already deleted)
            ForbiddenError: task belongs to someone else
        """
        task = self.repo.find_by_id(task_id)
        if not task:
            raise TaskNotFoundError(task_id)

        task.check_ownership(user_id, 'delete')

        self.repo.delete(task_id)
        logger.info("Task deleted", extra={"taskId": task_id, "userId": user_id})
