"""Pytest configuration and shared fixtures."""

import random
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from playsync.domain.value_objects import GameStatus, Pepper
from playsync.infrastructure.repositories import (
    GameTagRecord,
    InMemoryGameTagRepository,
)
from playsync.infrastructure.services import BcryptPasswordHasher

# Minimum bcrypt cost keeps the hashing tests fast
TEST_ROUNDS = 4


@pytest.fixture
def pepper() -> Pepper:
    """Create a test pepper."""
    return Pepper("test-pepper")


@pytest.fixture
def password_hasher(pepper: Pepper) -> BcryptPasswordHasher:
    """Create a fast bcrypt password hasher."""
    return BcryptPasswordHasher(pepper=pepper, rounds=TEST_ROUNDS, rng=random.Random(42))


@pytest.fixture
def game_tag_repository() -> InMemoryGameTagRepository:
    """Create a repository seeded with a few games."""
    return InMemoryGameTagRepository(
        [
            GameTagRecord("game-1", GameStatus.OPEN, ["valorant", "ranked"]),
            GameTagRecord("game-2", GameStatus.FULL, ["valorant", "casual"]),
            GameTagRecord("game-3", GameStatus.ENDED, ["pubg", "ranked"]),
            GameTagRecord("game-4", GameStatus.ENDED, ["pubg", "ranked"]),
            GameTagRecord("game-5", GameStatus.OPEN, ["valorant"]),
        ]
    )


@pytest.fixture
def client(
    game_tag_repository: InMemoryGameTagRepository,
) -> Generator[TestClient, None, None]:
    """Create a test client backed by the seeded repository."""
    from playsync.presentation.dependencies import get_game_tag_repository
    from playsync.presentation.main import app

    app.dependency_overrides[get_game_tag_repository] = lambda: game_tag_repository

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
