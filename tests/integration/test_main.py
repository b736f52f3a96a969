"""Integration tests for the application entry point."""

from fastapi.testclient import TestClient


class TestMain:
    """Integration tests for root endpoints and middleware."""

    def test_root(self, client: TestClient) -> None:
        """Test the root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "PlaySync API", "version": "0.1.0"}

    def test_health_check(self, client: TestClient) -> None:
        """Test the health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_request_id_header(self, client: TestClient) -> None:
        """Test that responses carry the caller's request ID."""
        response = client.get("/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    def test_unknown_route(self, client: TestClient) -> None:
        """Test that unknown routes still return 404."""
        response = client.get("/api/v1/unknown")

        assert response.status_code == 404
