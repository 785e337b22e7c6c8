import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite://", ENVIRONMENT="test")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which creates the schema.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client, app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_post(client):
    def _make_post(title="Hello", content="First post", author="Ada"):
        response = client.post(
            "/api/posts", json={"title": title, "content": content, "author": author}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_post
