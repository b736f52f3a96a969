"""Tests for the DTO validation dependency."""

from collections.abc import Generator
from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from playsync.presentation.api.dependencies import validate_dto
from playsync.presentation.api.exception_handlers import register_exception_handlers


class CreateScoreBody(BaseModel):
    """Body of the test route."""

    score: int = Field(..., ge=0)
    note: str | None = None


class CreateScoreQuery(BaseModel):
    """Query of the test route."""

    notify: bool = False


class CreateScoreParams(BaseModel):
    """Path params of the test route."""

    game_id: str = Field(..., min_length=3)


class CreateScoreRequest(BaseModel):
    """Whole request DTO of the test route."""

    body: CreateScoreBody
    query: CreateScoreQuery = Field(default_factory=CreateScoreQuery)
    params: CreateScoreParams


class TestValidateDto:
    """Test cases for validate_dto."""

    @pytest.fixture
    def client(self) -> Generator[TestClient, None, None]:
        """Create a client for an app using validate_dto."""
        app = FastAPI()
        register_exception_handlers(app)

        @app.post("/games/{game_id}/scores")
        async def create_score(
            dto: Annotated[CreateScoreRequest, Depends(validate_dto(CreateScoreRequest))],
        ) -> dict[str, object]:
            return {
                "game_id": dto.params.game_id,
                "score": dto.body.score,
                "notify": dto.query.notify,
            }

        with TestClient(app) as test_client:
            yield test_client

    def test_valid_request(self, client: TestClient) -> None:
        """Test that body, query and params are validated together."""
        response = client.post("/games/game-1/scores?notify=true", json={"score": 10})

        assert response.status_code == 200
        assert response.json() == {"game_id": "game-1", "score": 10, "notify": True}

    def test_invalid_body(self, client: TestClient) -> None:
        """Test the error envelope for an invalid body."""
        response = client.post("/games/game-1/scores", json={"score": -1})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Validation failed"
        assert data["errors"][0]["field"] == "body.score"

    def test_errors_from_several_locations(self, client: TestClient) -> None:
        """Test that every failing location is reported."""
        response = client.post("/games/g1/scores?notify=maybe", json={})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"body.score", "query.notify", "params.game_id"}

    def test_missing_body(self, client: TestClient) -> None:
        """Test a request without a body."""
        response = client.post("/games/game-1/scores")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "body.score"

    def test_invalid_json(self, client: TestClient) -> None:
        """Test a body that is not JSON."""
        response = client.post(
            "/games/game-1/scores",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "body", "message": "Request body is not valid JSON"}
        ]
