"""
Shared fixtures: a throwaway SQLite key-value table and an app client bound to it
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings, get_settings
from app.core.db import Base, get_db
from app.services.kv_store import SqlKeyValueStore
from main import app

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_ticketing.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_EMAIL = "admin@rizia.com"
ADMIN_PASSWORD = "admin123"

test_settings = Settings(
    ADMIN_EMAIL=ADMIN_EMAIL,
    ADMIN_PASSWORD=ADMIN_PASSWORD,
    PUBLIC_ANON_KEY="public-anon-key",
    PASSWORD_HASH_ITERATIONS=1000,
)

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def store(db_session):
    return SqlKeyValueStore(db_session)

@pytest.fixture
def settings():
    return test_settings

@pytest.fixture
def client(db_session):
    """App client whose requests share the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

def auth_header(token):
    return {"Authorization": f"Bearer {token}"}

def signup_user(client, email="asha@example.com", password="secret123", name="Asha"):
    """Sign a user up and return (token, user id)"""
    response = client.post("/auth/signup", json={"email": email, "password": password, "name": name})
    assert response.status_code == 200, response.text
    data = response.json()
    return data["session"]["access_token"], data["user"]["id"]

def admin_login(client):
    response = client.post("/auth/signin", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
        "isAdmin": True,
    })
    assert response.status_code == 200, response.text
    return response.json()["session"]["access_token"]

@pytest.fixture
def admin_token(client):
    return admin_login(client)

@pytest.fixture
def user(client):
    return signup_user(client)

SAMPLE_EVENT = {
    "title": "Jazz Night",
    "description": "Live jazz",
    "fullDescription": "A full evening of live jazz with two sets.",
    "category": "Music",
    "city": "Pune",
    "venue": "Blue Frog",
    "venueAddress": "Kalyani Nagar, Pune",
    "date": "2025-12-01",
    "time": "19:30",
    "price": "₹799",
    "image": "https://images.example.com/jazz.jpg",
    "tags": ["jazz", "live"],
    "features": ["Bar"],
    "language": "English",
    "ageRestriction": "18+",
}

def create_event(client, admin_token, **overrides):
    response = client.post("/events", json={**SAMPLE_EVENT, **overrides}, headers=auth_header(admin_token))
    assert response.status_code == 201, response.text
    return response.json()["event"]
