import pytest
from fastapi.testclient import TestClient

from app import create_app
from services.game_repository import InMemoryGameRepository
from services.game_service import GameService


@pytest.fixture
def repository():
    return InMemoryGameRepository()


@pytest.fixture
def game_service(repository):
    return GameService(repository)


@pytest.fixture
def client(repository):
    with TestClient(create_app(repository)) as test_client:
        yield test_client
