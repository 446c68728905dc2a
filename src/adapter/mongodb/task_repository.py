"""MongoDB implementation of TaskRepository."""

import uuid
from dataclasses import replace
from datetime import timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import TASKS_COLLECTION_NAME
from domain.model.errors import InternalError, TaskNotFoundError
from domain.model.task import Task

logger = getLogger(__name__)

_UPDATABLE_FIELDS = ('title', 'description', 'completed')


class MongoTaskRepository:
    def __init__(self, db: Database):
        self.collection = db[TASKS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for tasks collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(
                self.collection,
                [('user_id', 1), ('created_at', -1)],
                'idx_tasks_user_created_at',
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to create tasks indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Task:
        """Convert MongoDB document to Task domain model."""
        created_at = doc['created_at']
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Task(
            id=doc['_id'],
            user_id=doc['user_id'],
            title=doc['title'],
            description=doc['description'],
            completed=bool(doc.get('completed', False)),
            created_at=created_at,
        )

    # ── write operations ─────────────────────────────────────

    def create(self, task: Task) -> Task:
        """Insert a new task and return it with its id."""
        task_id = task.id or uuid.uuid4().hex
        doc = {
            '_id': task_id,
            'user_id': task.user_id,
            'title': task.title,
            'description': task.description,
            'completed': task.completed,
            'created_at': task.created_at,
        }
        try:
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to create task", extra={"userId": task.user_id, "error": str(e)})
            raise InternalError("Failed to create task") from e

        logger.info("Task created", extra={"taskId": task_id, "userId": task.user_id})
        return replace(task, id=task_id)

    def update(self, task_id: str, changes: dict) -> Task:
        """Set the updatable fields in changes; write-once fields are dropped."""
        update_doc = {k: v for k, v in changes.items() if k in _UPDATABLE_FIELDS}
        try:
            if update_doc:
                doc = self.collection.find_one_and_update(
                    {'_id': task_id},
                    {'$set': update_doc},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                doc = self.collection.find_one({'_id': task_id})
        except PyMongoError as e:
            logger.error("Failed to update task", extra={"taskId": task_id, "error": str(e)})
            raise InternalError("Failed to update task") from e

        if doc is None:
            logger.warning("Task not found for update", extra={"taskId": task_id})
            raise TaskNotFoundError(task_id)

        logger.debug("Task updated", extra={"taskId": task_id, "fields": sorted(update_doc)})
        return self._to_domain(doc)

    def delete(self, task_id: str) -> None:
        """Hard delete. Raises TaskNotFoundError when nothing was removed."""
        try:
            result = self.collection.delete_one({'_id': task_id})
        except PyMongoError as e:
            logger.error("Failed to delete task", extra={"taskId": task_id, "error": str(e)})
            raise InternalError("Failed to delete task") from e

        if result.deleted_count == 0:
            logger.warning("Task not found for deletion", extra={"taskId": task_id})
            raise TaskNotFoundError(task_id)

        logger.info("Task deleted", extra={"taskId": task_id})

    # ── read operations ──────────────────────────────────────

    def find_all(self, user_id: str) -> list[Task]:
        """List a user's tasks, newest first."""
        try:
            docs = self.collection.find({'user_id': user_id}).sort('created_at', -1)
            tasks = [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list tasks", extra={"userId": user_id, "error": str(e)})
            raise InternalError("Failed to list tasks") from e

        logger.debug("Listed tasks", extra={"userId": user_id, "count": len(tasks)})
        return tasks

    def find_by_id(self, task_id: str) -> Task | None:
        try:
            doc = self.collection.find_one({'_id': task_id})
        except PyMongoError as e:
            logger.error("Failed to retrieve task", extra={"taskId": task_id, "error": str(e)})
            raise InternalError("Failed to retrieve task") from e

        return self._to_domain(doc) if doc else None
