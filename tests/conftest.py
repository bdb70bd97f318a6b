import os

# Settings are read on import, so the database must be configured first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dealflip.ai.gateway import AIGateway, get_ai_gateway
from dealflip.database import Base, get_db
from dealflip.errors import AIGatewayError
from dealflip.main import app
from dealflip.models import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class FakeCompletionClient:
    """Stands in for ChatCompletionClient; replays a canned reply."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete_json(self, prompt, temperature):
        self.calls.append((prompt, temperature))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def users(db):
    """Two users so tenant scoping can be checked."""
    alex = User(username="alex", password="password123", full_name="Alex Smith")
    sam = User(username="sam", password="hunter2", full_name="Sam Lee")
    db.add_all([alex, sam])
    db.commit()
    return alex.id, sam.id


@pytest.fixture
def fake_ai(client):
    """Route AI calls to a FakeCompletionClient and return it."""
    fake = FakeCompletionClient()
    app.dependency_overrides[get_ai_gateway] = lambda: AIGateway(client=fake)
    return fake


@pytest.fixture
def provider_down():
    return AIGatewayError("Provider returned 503: upstream unavailable")
