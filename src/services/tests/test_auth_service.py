"""Unit tests for the authentication gate."""

import unittest
from unittest.mock import MagicMock

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import AuthenticationError, InternalError
from domain.model.user import AuthenticatedUser, User
from services.auth_service import AuthenticationGate
from services.user_service import FindUser


class TestAuthenticationGate(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.user = self.repo.create(User.create('foo@bar.com'))
        self.gate = AuthenticationGate(FindUser(self.repo))

    def test_required_resolves_known_user(self):
        caller = self.gate.authenticate(self.user.id)
        self.assertEqual(caller, AuthenticatedUser(id=self.user.id, email='foo@bar.com'))

    def test_required_missing_identifier_raises(self):
        for identifier in (None, '', '  '):
            with self.assertRaises(AuthenticationError) as ctx:
                self.gate.authenticate(identifier, required=True)
            self.assertEqual(ctx.exception.status_code, 401)

    def test_required_unknown_user_raises(self):
        with self.assertRaises(AuthenticationError):
            self.gate.authenticate('unknown')

    def test_optional_mode_continues_without_identity(self):
        self.assertIsNone(self.gate.authenticate(None, required=False))
        self.assertIsNone(self.gate.authenticate('unknown', required=False))

    def test_optional_mode_resolves_known_user(self):
        self.assertEqual(self.gate.authenticate(self.user.id, required=False).id, self.user.id)

    def test_store_failure_is_internal_not_unauthenticated(self):
        repo = MagicMock()
        repo.find_by_id.side_effect = InternalError("Failed to look up user")
        gate = AuthenticationGate(FindUser(repo))

        for required in (True, False):
            with self.assertRaises(InternalError):
                gate.authenticate('u1', required=required)

    def test_unexpected_failure_is_wrapped_as_internal(self):
        repo = MagicMock()
        repo.find_by_id.side_effect = RuntimeError("boom")
        gate = AuthenticationGate(FindUser(repo))

        with self.assertRaises(InternalError) as ctx:
            gate.authenticate('u1')
        self.assertEqual(ctx.exception.status_code, 500)


if __name__ == '__main__':
    unittest.main()
