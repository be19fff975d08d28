"""
Pytest configuration and shared fixtures

The snapshot store points at a throwaway SQLite file and backend HTTP goes
through FakeSession, so no server or network is needed.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="influencer-discovery-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["INFLUENCER_SOURCE"] = "backend"
os.environ["BACKEND_URL"] = "http://backend.test/api"
os.environ["BACKEND_API_TOKEN"] = "service-token"
os.environ["BACKEND_RETRY_DELAY"] = "0"

import pytest  # noqa: E402
import requests  # noqa: E402

from api.backend_client import BackendClient  # noqa: E402
from api.models import Base, SessionLocal, engine  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, payload=None, raw=None):
        self.status_code = status_code
        self._payload = payload
        self._raw = raw

    def json(self):
        if self._raw is not None:
            raise ValueError("not JSON")
        return self._payload


class FakeSession:
    """
    Stands in for requests.Session.

    `routes` maps "METHOD /path" to a FakeResponse, an exception instance,
    or a list of those consumed one per call.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        path = url.split("/api", 1)[1]
        key = f"{method} {path}"
        self.calls.append({"key": key, "headers": headers, **kwargs})
        outcome = self.routes.get(key, FakeResponse(404, {"message": "not found"}))
        if isinstance(outcome, list):
            outcome = outcome.pop(0) if len(outcome) > 1 else outcome[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def backend(fake_session):
    return BackendClient(session=fake_session, retries=3, retry_delay=0)


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def influencers():
    return [
        {
            "id": "1", "name": "Alice Runner", "category": "video", "gender": "female",
            "age": 24, "engagement_rate": 5,
            "country": {"name": "India"}, "state": {"name": "Goa"}, "city": {"name": "Panaji"},
            "niche": {"name": "Fitness"},
            "data": {"instagram": {"total_followers": 100000}, "youtube": {"total_followers": 50000}},
        },
        {
            "id": "2", "name": "Bob Baker", "category": "image", "gender": "male",
            "age": 46, "engagement_rate": 12,
            "country": {"name": "Brazil"}, "niche": {"name": "Food"},
            "data": {"facebook": {"total_followers": 5000}},
            "wishlist": True,
        },
        {"id": "3", "name": "Cara"},
    ]


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
