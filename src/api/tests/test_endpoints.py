"""Tests for root, health and fallback error handling."""

import unittest
from unittest.mock import patch, MagicMock

from fastapi.testclient import TestClient

from api.main import app, VERSION


class TestRootAndHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["version"], VERSION)

    @patch('api.routes.health.get_mongodb_client')
    def test_health_ok(self, mock_get_client):
        mock_get_client.return_value = MagicMock()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["services"]["mongodb"]["status"], "healthy")
        self.assertTrue(data["timestamp"].endswith("Z"))

    @patch('api.routes.health.get_mongodb_client')
    def test_health_degraded_without_mongodb(self, mock_get_client):
        mock_get_client.return_value = None

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")


class TestFallbackErrors(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_unknown_route_is_404_with_error_body(self):
        response = self.client.get("/api/nothing-here")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {
            "status": "error",
            "code": "NOT_FOUND",
            "message": "Route not found: GET /api/nothing-here",
        })

    def test_malformed_json_is_400(self):
        response = self.client.post(
            "/api/users",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")


if __name__ == '__main__':
    unittest.main()
