"""MongoDB implementation of UserRepository."""

import uuid
from dataclasses import replace
from datetime import timezone
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import ConflictError, InternalError
from domain.model.user import User
from domain.model.validation import normalize_email

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection.

        The unique email index is what makes concurrent registrations with
        the same email fail instead of creating two accounts.
        """
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        created_at = doc['created_at']
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return User(id=doc['_id'], email=doc['email'], created_at=created_at)

    def create(self, user: User) -> User:
        """Insert a new user and return it with its id."""
        email = normalize_email(user.email)
        user_id = user.id or uuid.uuid4().hex
        user_doc = {
            '_id': user_id,
            'email': email,
            'created_at': user.created_at,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise ConflictError(f"Email {email} is already in use") from e
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise InternalError("Failed to create user") from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return replace(user, id=user_id, email=email)

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        email = normalize_email(email)
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise InternalError("Failed to look up user") from e

        return self._to_domain(doc) if doc else None

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise InternalError("Failed to look up user") from e

        return self._to_domain(doc) if doc else None
