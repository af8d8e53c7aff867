"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from larder.database import Base, get_db
from larder.main import app
from larder.models import Category, ShopIngredient, User
from larder.models.enums import IngredientType, StorageType


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/larder_test"
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


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


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str = "Test User") -> AuthHeaders:
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": "testpass123", "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, "other@example.com", name="Other User")


@pytest.fixture
def make_user(db):
    """Create users directly in the database."""

    def _make_user(email: str) -> User:
        user = User(email=email, name=email.split("@")[0], password_hash="fake")
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def catalog(db):
    """A small shared catalog, keyed by name."""
    baking = Category(name="Baking", color="#f97316", icon="baking")
    dairy = Category(name="Dairy", color="#fbbf24", icon="dairy")
    db.add_all([baking, dairy])
    db.flush()

    entries = [
        ShopIngredient(
            name="Plain flour",
            type=IngredientType.FOOD,
            storage_type=StorageType.PANTRY,
            category_id=baking.id,
        ),
        ShopIngredient(
            name="Sugar",
            type=IngredientType.FOOD,
            storage_type=StorageType.PANTRY,
            category_id=baking.id,
        ),
        ShopIngredient(
            name="Milk",
            type=IngredientType.DRINK,
            storage_type=StorageType.FRIDGE,
            category_id=dairy.id,
        ),
        ShopIngredient(
            name="Butter",
            type=IngredientType.FOOD,
            storage_type=StorageType.FRIDGE,
            category_id=dairy.id,
        ),
        ShopIngredient(name="Eggs", type=IngredientType.FOOD, storage_type=StorageType.FRIDGE),
    ]
    db.add_all(entries)
    db.commit()
    return {entry.name: entry for entry in entries}
