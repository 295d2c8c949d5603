# tests/conftest.py
import pytest
from httpx import ASGITransport, AsyncClient

from employee_directory.config import Settings
from employee_directory.database import create_database
from employee_directory.main import create_app
from employee_directory.tests.utils import login

TEST_SETTINGS = Settings(secret_key="test-secret-key")


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def db():
    """A freshly seeded directory for every test."""
    return create_database()


@pytest.fixture
def app(settings, db):
    return create_app(settings=settings, db=db)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def normal_user_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        token = await login(ac, "employee", "employee123")
        ac.headers["Authorization"] = f"Bearer {token}"
        yield ac


@pytest.fixture
async def admin_user_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        token = await login(ac, "admin", "admin123")
        ac.headers["Authorization"] = f"Bearer {token}"
        yield ac
