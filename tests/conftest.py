"""Fixtures dos testes: app com SQLite em memória"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from football_stats.core.config import Settings
from football_stats.core.database import Database
from football_stats.main import create_app

MEMORY_DB_URL = "sqlite+aiosqlite://"


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": MEMORY_DB_URL,
        "DEBUG": True,
        "RATE_LIMIT_ENABLED": False,
        "ENVIRONMENT": "test",
    }
    values.update(overrides)
    return Settings(**values)


def team_payload(**overrides) -> dict:
    """Corpo válido de criação"""
    payload = {
        "Team": "Rovers",
        "GamesPlayed": 10,
        "Win": 6,
        "Draw": 2,
        "Loss": 2,
        "GoalsFor": 20,
        "GoalsAgainst": 10,
        "Points": 20,
        "Year": 2005,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    return team_payload


@pytest.fixture
def add_team(client):
    """Cria um registro via API e devolve o produto"""
    def _add(**overrides) -> dict:
        response = client.post("/addteamdata", json=team_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["product"]
    return _add


@pytest_asyncio.fixture
async def database():
    db = Database(MEMORY_DB_URL)
    await db.connect()
    try:
        yield db
    finally:
        await db.close()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as db_session:
        yield db_session
