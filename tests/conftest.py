"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from bookit.api_client import ApiClient
from bookit.client import BookingClient
from bookit.main import app
from bookit.repository import Repository
from bookit.schemas import Booking, Service, User
from bookit.store import MemoryStore

TODAY = date(2025, 5, 20)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repo(store):
    return Repository(store)


@pytest.fixture
def http():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api(http):
    return ApiClient(base_url="http://testserver", session=http)


@pytest.fixture
def client(repo, api):
    return BookingClient(repo, api, today=lambda: TODAY)


@pytest.fixture
def owner(client):
    """Signed-up owner with one service; session left logged out."""
    client.signup("Olga Owner", "olga@example.com", "secret1", "owner")
    service = client.add_service("Haircut", "Classic cut and style", 60, 500)
    user = client.session.user
    client.logout()
    return user, service


def make_service(**overrides):
    fields = dict(
        id="svc_1",
        owner_id="user_owner",
        owner_name="Olga",
        name="Haircut",
        description="Classic cut",
        duration=60,
        price=500,
    )
    fields.update(overrides)
    return Service(**fields)


def make_booking(**overrides):
    fields = dict(
        id="bkg_1",
        service_id="svc_1",
        user_id="user_client",
        user_name="Cara",
        user_email="cara@example.com",
        date=date(2025, 6, 1),
        time="10:00 AM",
        status="confirmed",
    )
    fields.update(overrides)
    return Booking(**fields)


def make_user(**overrides):
    fields = dict(
        id="user_client",
        name="Cara",
        email="cara@example.com",
        password="secret1",
        role="user",
    )
    fields.update(overrides)
    return User(**fields)
