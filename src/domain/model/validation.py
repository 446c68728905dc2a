"""Field validation rules shared by the task and user use cases.

All checks are pure and raise ValidationError on the first violation.
"""

import re

from domain.model.errors import ValidationError

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def normalize_email(email: str) -> str:
    """Lowercase and trim an email for storage and comparison."""
    return email.strip().lower()


def validate_email(email: str | None) -> str:
    """Check email presence and format. Returns the normalized email."""
    if is_blank(email):
        raise ValidationError("Email is required")

    if not EMAIL_PATTERN.match(email.strip()):
        raise ValidationError("Invalid email format")

    return normalize_email(email)


def validate_user_id(user_id: str | None) -> None:
    if is_blank(user_id):
        raise ValidationError("User ID is required")


def _validate_text(value: str | None, field: str, max_length: int, required: bool) -> str:
    if value is None or value.strip() == "":
        if required:
            raise ValidationError(f"{field} is required")
        raise ValidationError(f"{field} cannot be empty")

    text = value.strip()
    if len(text) > max_length:
        raise ValidationError(f"{field} cannot exceed {max_length} characters")
    return text


def validate_title(title: str | None, required: bool = True) -> str:
    """Validate a task title. Returns the trimmed title.

    With required=False (partial updates) a present-but-empty title reports
    "cannot be empty" instead of "is required".
    """
    return _validate_text(title, "Title", MAX_TITLE_LENGTH, required)


def validate_description(description: str | None, required: bool = True) -> str:
    """Validate a task description. Returns the trimmed description."""
    return _validate_text(description, "Description", MAX_DESCRIPTION_LENGTH, required)
