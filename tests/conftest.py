"""Pytest configuration and fixtures."""

import os

import httpx
import pytest
from fastapi.testclient import TestClient

from blog_api.api.dependencies import get_image_service
from blog_api.config import Settings
from blog_api.database import Base, create_session_factory, get_db
from blog_api.main import create_app
from blog_api.models.enums import Role
from blog_api.models.user import User
from blog_api.services.images import ImageService

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, username and email."""

    def __init__(
        self, *args, user_id: int | None = None, username: str = "", email: str = "", **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/blog", "/blog_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

test_settings = Settings(
    database_url=SQLALCHEMY_DATABASE_URL,
    jwt_secret="test-secret",  # noqa: S106
    environment="test",
    access_token_expiration_minutes=30,
    refresh_token_expiration_minutes=60 * 24,
    cloudinary_cloud_name="demo",
    cloudinary_api_key="test-key",
    cloudinary_api_secret="test-api-secret",  # noqa: S106
    image_max_bytes=1024,
)
app = create_app(test_settings)
engine = app.state.engine
TestingSessionLocal = create_session_factory(engine)


class FakeImageProvider:
    """Records requests to the image host and answers like it would."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "boom"}})
        if request.url.path.endswith("/destroy"):
            return httpx.Response(200, json={"result": "ok"})
        return httpx.Response(
            200,
            json={
                "public_id": "blog/abc123",
                "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/blog/abc123.png",
            },
        )


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def settings():
    return test_settings


@pytest.fixture
def token_service():
    return app.state.tokens


@pytest.fixture
def image_provider():
    return FakeImageProvider()


@pytest.fixture
def image_service(image_provider):
    return ImageService(test_settings, transport=httpx.MockTransport(image_provider))


@pytest.fixture(scope="function")
def client(db, image_service):
    """Create a test client with database and image host overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_service] = lambda: image_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username: str, password: str = TEST_PASSWORD) -> AuthHeaders:
    """Register a user, log in, and return bearer headers for them."""
    email = f"{username.lower()}@example.com"
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200
    token = response.json()["accessToken"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=user_id, username=username, email=email
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "testuser")


@pytest.fixture
def other_headers(client):
    """A second, unrelated non-admin user."""
    return register_and_login(client, "otheruser")


@pytest.fixture
def admin_headers(client, db):
    """Create an admin user and return auth headers for them."""
    headers = register_and_login(client, "admin")
    db.query(User).filter(User.id == headers.user_id).update({User.role: Role.ADMIN.value})
    db.commit()
    return headers


@pytest.fixture
def category(client, admin_headers):
    """A category created by the admin."""
    response = client.post(
        "/api/categories",
        headers=admin_headers,
        json={"name": "Tech", "description": "Technology posts"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def post(client, auth_headers, category):
    """A published post by ``auth_headers``' user."""
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={
            "title": "First post",
            "content": "Hello world",
            "categoryId": category["id"],
            "published": True,
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_user(client):
    """Factory fixture: ``make_user("bob")`` registers and logs in a new user."""

    def _make_user(username: str, password: str = TEST_PASSWORD) -> AuthHeaders:
        return register_and_login(client, username, password)

    return _make_user
