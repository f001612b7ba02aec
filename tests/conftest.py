"""
Shared fixtures: a throwaway SQLite database, fake Mailgun and a test client
"""

import asyncio
import os
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from main import app
from rsvp.core.config import Settings, get_settings
from rsvp.core.db import Base, get_db
from rsvp.services.mail_service import get_http_client

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_rsvp.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def test_settings():
    return Settings(
        HOST="events.example.com",
        ORGANISER_NAME="Test Organiser",
        TEMPLATE_DIR=os.path.join(ROOT_DIR, "templates"),
        NOTIFY_EMAIL="organiser@example.com",
        MAILGUN_FROM_NAME="Event RSVP",
        MAILGUN_FROM_EMAIL_PREFIX="rsvp",
        MAILGUN_API_KEY="key-test",
        INSERT_PASSWORD="let-me-in",
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

class FakeMailgun:
    """Records Mailgun calls and answers with a configurable status"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.delay = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        return httpx.Response(self.status_code, json={"message": "Queued. Thank you."})

    def sent_forms(self):
        return [
            {key: values[0] for key, values in parse_qs(request.content.decode()).items()}
            for request in self.requests
        ]

@pytest.fixture
def mailgun():
    return FakeMailgun()

@pytest.fixture
def client(db_session, test_settings, mailgun):
    """Test client wired to the test database, settings and fake Mailgun"""
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(mailgun))
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_client] = lambda: http_client
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()
        asyncio.run(http_client.aclose())
