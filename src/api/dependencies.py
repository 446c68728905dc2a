from fastapi import Depends, HTTPException

from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.task_repository import MongoTaskRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.task_repository import TaskRepository
from port.user_repository import UserRepository
from services.auth_service import AuthenticationGate
from services.task_service import CreateTask, DeleteTask, GetTasks, UpdateTask
from services.user_service import CreateUser, FindUser


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


# ── repositories ─────────────────────────────────────────


def get_task_repo() -> TaskRepository:
    return MongoTaskRepository(_get_db())


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


# ── use cases ────────────────────────────────────────────


def get_create_task(repo: TaskRepository = Depends(get_task_repo)) -> CreateTask:
    return CreateTask(repo)


def get_get_tasks(repo: TaskRepository = Depends(get_task_repo)) -> GetTasks:
    return GetTasks(repo)


def get_update_task(repo: TaskRepository = Depends(get_task_repo)) -> UpdateTask:
    return UpdateTask(repo)


def get_delete_task(repo: TaskRepository = Depends(get_task_repo)) -> DeleteTask:
    return DeleteTask(repo)


def get_create_user(repo: UserRepository = Depends(get_user_repo)) -> CreateUser:
    return CreateUser(repo)


def get_find_user(repo: UserRepository = Depends(get_user_repo)) -> FindUser:
    return FindUser(repo)


def get_auth_gate(find_user: FindUser = Depends(get_find_user)) -> AuthenticationGate:
    return AuthenticationGate(find_user)
