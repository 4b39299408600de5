import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# importing the app registers every model on Base.metadata
from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.tests.helpers import make_user

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return make_user(db, "admin@uni.edu", role="admin", first_name="Ada", last_name="Admin")


@pytest.fixture
def faculty(db):
    return make_user(db, "khan@uni.edu", first_name="Ali", last_name="Khan")


@pytest.fixture
def other_faculty(db):
    return make_user(db, "raza@uni.edu", first_name="Sara", last_name="Raza", department="Electrical Engineering")
