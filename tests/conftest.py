import os

import httpx
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_github_finder.db")
os.environ.setdefault("GITHUB_API_TOKEN", "test-token")
os.environ.setdefault("GITHUB_API_BASE_URL", "https://api.github.test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import app.models  # noqa: E402,F401
from app.api.deps import get_github_client  # noqa: E402
from app.config import get_settings  # noqa: E402
from app.database import SessionLocal, engine  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models.base import Base  # noqa: E402
from app.services.github_client import GitHubSearchClient  # noqa: E402
from tests.helpers import GitHubStub  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    get_settings.cache_clear()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def github_stub():
    return GitHubStub()


@pytest.fixture()
def github_client(github_stub):
    client = GitHubSearchClient(
        base_url="https://api.github.test",
        token="test-token",
        transport=httpx.MockTransport(github_stub.handler),
    )
    yield client
    client.close()


@pytest.fixture()
def client(github_client):
    app = create_app()
    app.dependency_overrides[get_github_client] = lambda: github_client
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as db:
        yield db
        db.rollback()
