import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.db.session import Base, get_db
from blog_api.main import app

# One shared in-memory database per test run, rebuilt for every test
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, username="alice", email=None, name=None, password="secret123"):
    response = client.post("/auth/signup", json={
        "email": email or f"{username}@example.com",
        "password": password,
        "name": name or username.title(),
        "username": username,
    })
    assert response.status_code == 201, response.text
    return response.json()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return signup(client, "alice")


@pytest.fixture
def bob(client):
    return signup(client, "bob")


def create_post(client, token, title="A day at the market", content="Fresh bread and cheese everywhere.",
                category="FOOD"):
    response = client.post(
        "/posts",
        json={"title": title, "content": content, "category": category},
        headers=auth_header(token),
    )
    assert response.status_code == 201, response.text
    return response.json()
