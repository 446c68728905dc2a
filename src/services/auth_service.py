"""Authentication gate: resolves the acting user of a request.

The caller identifier is a plain user id supplied by the client. The gate
only checks that it names an existing user; it is not a credential.
"""

import logging

from domain.model.errors import AuthenticationError, InternalError
from domain.model.user import AuthenticatedUser
from domain.model.validation import is_blank
from services.user_service import FindUser

logger = logging.getLogger(__name__)


class AuthenticationGate:
    def __init__(self, find_user: FindUser):
        self.find_user = find_user

    def authenticate(self, identifier: str | None, required: bool = True) -> AuthenticatedUser | None:
        """Resolve identifier to an AuthenticatedUser.

        In optional mode a missing identifier or unknown user yields None.

        Raises:
            AuthenticationError: required mode and identifier missing or unknown
            InternalError: the lookup itself failed (store unavailable, ...)
        """
        if is_blank(identifier):
            if required:
                raise AuthenticationError("Authentication required")
            return None

        user = self._resolve(identifier.strip())
        if user is None:
            if required:
                logger.info("Authentication failed: unknown user", extra={"userId": identifier})
                raise AuthenticationError("User not found")
            return None

        return AuthenticatedUser(id=user.id, email=user.email)

    def _resolve(self, identifier: str):
        try:
            return self.find_user.find_by_id(identifier)
        except InternalError:
            raise
        except Exception as e:
            logger.exception("Authentication lookup failed", extra={"userId": identifier})
            raise InternalError("Authentication error") from e
