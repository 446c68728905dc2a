"""Unit tests for the task use cases."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from adapter.fake.task_repository import FakeTaskRepository
from domain.model.errors import (
    ForbiddenError,
    NotFoundError,
    TaskNotFoundError,
    ValidationError,
)
from domain.model.task import CreateTaskData, Task, UpdateTaskData
from services.task_service import CreateTask, DeleteTask, GetTasks, UpdateTask


def _data(user_id='u1', title='Buy milk', description='2% milk') -> CreateTaskData:
    return CreateTaskData(user_id=user_id, title=title, description=description)


class TestCreateTask(unittest.TestCase):

    def setUp(self):
        self.repo = FakeTaskRepository()
        self.use_case = CreateTask(self.repo)

    def test_create_task_success(self):
        before = datetime.now(timezone.utc)
        task = self.use_case.execute(_data())

        self.assertIsNotNone(task.id)
        self.assertFalse(task.completed)
        self.assertEqual(task.title, 'Buy milk')
        self.assertEqual(task.description, '2% milk')
        self.assertGreaterEqual(task.created_at, before)
        self.assertEqual(self.repo.find_by_id(task.id), task)

    def test_title_length_boundary(self):
        self.use_case.execute(_data(title='a' * 100))
        with self.assertRaises(ValidationError):
            self.use_case.execute(_data(title='a' * 101))

    def test_description_length_boundary(self):
        self.use_case.execute(_data(description='d' * 500))
        with self.assertRaises(ValidationError):
            self.use_case.execute(_data(description='d' * 501))

    def test_rules_checked_in_order(self):
        """user id, then title, then description; first failure wins."""
        with self.assertRaises(ValidationError) as ctx:
            self.use_case.execute(CreateTaskData(user_id='', title='', description=''))
        self.assertEqual(str(ctx.exception), 'User ID is required')

        with self.assertRaises(ValidationError) as ctx:
            self.use_case.execute(CreateTaskData(user_id='u1', title=None, description=''))
        self.assertEqual(str(ctx.exception), 'Title is required')

        with self.assertRaises(ValidationError) as ctx:
            self.use_case.execute(CreateTaskData(user_id='u1', title='T', description='   '))
        self.assertEqual(str(ctx.exception), 'Description is required')

    def test_validation_failure_does_not_touch_store(self):
        repo = MagicMock()
        with self.assertRaises(ValidationError):
            CreateTask(repo).execute(_data(title=''))
        repo.create.assert_not_called()

    def test_fields_are_trimmed(self):
        task = self.use_case.execute(_data(title='  Buy milk  ', description=' 2% milk '))
        self.assertEqual(task.title, 'Buy milk')
        self.assertEqual(task.description, '2% milk')


class TestGetTasks(unittest.TestCase):

    def setUp(self):
        self.repo = FakeTaskRepository()
        self.use_case = GetTasks(self.repo)
        now = datetime.now(timezone.utc)
        for minutes, title in ((30, 'oldest'), (1, 'newest'), (10, 'middle')):
            self.repo.create(Task(user_id='u1', title=title, description='d', completed=False,
                                  created_at=now - timedelta(minutes=minutes)))
        self.foreign = self.repo.create(Task.create('u2', 'theirs', 'd'))

    def test_execute_returns_own_tasks_newest_first(self):
        tasks = self.use_case.execute('u1')
        self.assertEqual([t.title for t in tasks], ['newest', 'middle', 'oldest'])

    def test_execute_requires_user_id(self):
        for value in (None, '', '  '):
            with self.assertRaises(ValidationError):
                self.use_case.execute(value)

    def test_get_by_id_with_auth_returns_owned_task(self):
        task = self.use_case.execute_get_by_id_with_auth(self.foreign.id, 'u2')
        self.assertEqual(task.id, self.foreign.id)

    def test_get_by_id_with_auth_other_owner_is_forbidden(self):
        with self.assertRaises(ForbiddenError):
            self.use_case.execute_get_by_id_with_auth(self.foreign.id, 'u1')

    def test_get_by_id_with_auth_missing_returns_none(self):
        self.assertIsNone(self.use_case.execute_get_by_id_with_auth('missing', 'u1'))

    def test_get_by_id_with_auth_requires_both_ids(self):
        with self.assertRaises(ValidationError):
            self.use_case.execute_get_by_id_with_auth('', 'u1')
        with self.assertRaises(ValidationError):
            self.use_case.execute_get_by_id_with_auth(self.foreign.id, None)


class TestUpdateTask(unittest.TestCase):

    def setUp(self):
        self.repo = FakeTaskRepository()
        self.task = CreateTask(self.repo).execute(_data())
        self.use_case = UpdateTask(self.repo)

    def test_complete_only_changes_completed(self):
        updated = self.use_case.execute_with_auth(self.task.id, 'u1', UpdateTaskData(completed=True))

        self.assertTrue(updated.completed)
        self.assertEqual(updated.title, self.task.title)
        self.assertEqual(updated.description, self.task.description)
        self.assertEqual(updated.user_id, 'u1')
        self.assertEqual(updated.created_at, self.task.created_at)

    def test_other_owner_is_forbidden(self):
        with self.assertRaises(ForbiddenError):
            self.use_case.execute_with_auth(self.task.id, 'u2', UpdateTaskData(completed=True))
        self.assertFalse(self.repo.find_by_id(self.task.id).completed)

    def test_missing_task_is_not_found_for_any_caller(self):
        for caller in ('u1', 'u2', None):
            with self.assertRaises(TaskNotFoundError):
                self.use_case.execute_with_auth('missing', caller, UpdateTaskData(completed=True))

    def test_ownership_checked_before_validation(self):
        with self.assertRaises(ForbiddenError):
            self.use_case.execute_with_auth(self.task.id, 'u2', UpdateTaskData(title=''))

    def test_present_fields_are_validated(self):
        with self.assertRaises(ValidationError) as ctx:
            self.use_case.execute_with_auth(self.task.id, 'u1', UpdateTaskData(title='  '))
        self.assertEqual(str(ctx.exception), 'Title cannot be empty')

        with self.assertRaises(ValidationError):
            self.use_case.execute_with_auth(self.task.id, 'u1', UpdateTaskData(description='d' * 501))

    def test_invalid_field_leaves_task_untouched(self):
        with self.assertRaises(ValidationError):
            self.use_case.execute_with_auth(
                self.task.id, 'u1', UpdateTaskData(title='x' * 101, completed=True))
        self.assertFalse(self.repo.find_by_id(self.task.id).completed)

    def test_returns_reread_task(self):
        repo = MagicMock()
        repo.find_by_id.return_value = self.task
        stored = Task(id=self.task.id, user_id='u1', title='Server title', description='d',
                      completed=True, created_at=self.task.created_at)
        repo.update.return_value = stored

        result = UpdateTask(repo).execute_with_auth(self.task.id, 'u1', UpdateTaskData(title=' New '))

        repo.update.assert_called_once_with(self.task.id, {'title': 'New'})
        self.assertIs(result, stored)


class TestDeleteTask(unittest.TestCase):

    def setUp(self):
        self.repo = FakeTaskRepository()
        self.task = CreateTask(self.repo).execute(_data())
        self.use_case = DeleteTask(self.repo)

    def test_owner_deletes(self):
        self.assertIsNone(self.use_case.execute_with_auth(self.task.id, 'u1'))
        self.assertIsNone(self.repo.find_by_id(self.task.id))

    def test_second_delete_is_not_found(self):
        self.use_case.execute_with_auth(self.task.id, 'u1')
        with self.assertRaises(NotFoundError):
            self.use_case.execute_with_auth(self.task.id, 'u1')

    def test_other_owner_is_forbidden_and_task_survives(self):
        with self.assertRaises(ForbiddenError):
            self.use_case.execute_with_auth(self.task.id, 'u2')
        self.assertIsNotNone(self.repo.find_by_id(self.task.id))

    def test_missing_task_is_not_found(self):
        with self.assertRaises(TaskNotFoundError):
            self.use_case.execute_with_auth('missing', 'u2')


if __name__ == '__main__':
    unittest.main()
