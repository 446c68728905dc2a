"""Pydantic models for API request/response.

Wire names are camelCase (userId, createdAt); Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.model.task import CreateTaskData, Task, UpdateTaskData
from domain.model.user import CreateUserData, User
from utils.dates import to_iso_string


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── requests ─────────────────────────────────────────────


class CreateUserRequest(CamelModel):
    """Request model for user registration."""
    email: str | None = None

    def to_domain(self) -> CreateUserData:
        return CreateUserData(email=self.email)


class CreateTaskRequest(CamelModel):
    """Request model for creating a task. Field rules are enforced by the use case."""
    user_id: str | None = None
    title: str | None = None
    description: str | None = None

    def to_domain(self) -> CreateTaskData:
        return CreateTaskData(user_id=self.user_id, title=self.title, description=self.description)


class UpdateTaskRequest(CamelModel):
    """Request model for a partial task update. userId identifies the caller."""
    user_id: str | None = None
    title: str | None = None
    description: str | None = None
    completed: bool | None = None

    def to_domain(self) -> UpdateTaskData:
        return UpdateTaskData(title=self.title, description=self.description, completed=self.completed)


# ── responses ────────────────────────────────────────────


class TaskResponse(CamelModel):
    """Response model for task."""
    id: str = Field(..., description="Task ID")
    user_id: str = Field(..., description="Owner user ID")
    title: str
    description: str
    completed: bool
    created_at: str = Field(..., description="ISO-8601 creation timestamp")


class UserResponse(CamelModel):
    """Response model for user."""
    id: str = Field(..., description="User ID")
    email: str
    created_at: str = Field(..., description="ISO-8601 creation timestamp")


class ErrorResponse(BaseModel):
    status: str = "error"
    code: str
    message: str


def to_task_response(task: Task) -> TaskResponse:
    """Convert domain Task to API TaskResponse."""
    return TaskResponse(
        id=task.id or "",
        user_id=task.user_id,
        title=task.title,
        description=task.description,
        completed=task.completed,
        created_at=to_iso_string(task.created_at),
    )


def to_user_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse."""
    return UserResponse(
        id=user.id or "",
        email=user.email,
        created_at=to_iso_string(user.created_at),
    )
