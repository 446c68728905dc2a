"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Each error carries the HTTP status class and a stable code, so the API
boundary maps them to responses without looking at message text.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Input violates a business validation rule."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthenticationError(DomainError):
    """Caller identity is missing or cannot be resolved."""

    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Authenticated caller is not the owner of the resource."""

    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    status_code = 404
    code = "NOT_FOUND"


class TaskNotFoundError(NotFoundError):
    """Task with the given id does not exist."""

    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} was not found")


class UserNotFoundError(NotFoundError):
    """User with the given id or email does not exist."""

    code = "USER_NOT_FOUND"

    def __init__(self, identifier: str, is_email: bool = False):
        self.identifier = identifier
        self.is_email = is_email
        kind = "email" if is_email else "ID"
        super().__init__(f"User with {kind} {identifier} was not found")


class ConflictError(DomainError):
    """Entity with the same unique key already exists."""

    status_code = 409
    code = "CONFLICT"


class InternalError(DomainError):
    """Unexpected failure, e.g. the store is unreachable."""
