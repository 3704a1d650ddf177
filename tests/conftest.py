"""
Test configuration and fixtures.

Provides:
- In-memory SQLite engine shared across connections (StaticPool)
- A fixed, adjustable shop clock
- TestClient with session and clock dependencies overridden
- Helpers to create customers, admins and barbers
"""
import os
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.auth import create_access_token, hash_password
from app.clock import get_now
from app.config import Settings
from app.db import get_session
from app.main import app
from app.models import Barber, User
from app.slots import SlotRules

# Monday 2026-03-09, 08:00 shop time
MONDAY = datetime(2026, 3, 9, 8, 0)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def rules() -> SlotRules:
    return SlotRules.from_settings(Settings())


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(MONDAY)


@pytest.fixture
def client(session, clock):
    def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_now] = clock
    yield TestClient(app)
    app.dependency_overrides.clear()


def _make_user(session: Session, email: str, role: str) -> User:
    user = User(email=email, name=email.split("@")[0], password_hash=hash_password("password123"), role=role)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def customer(session) -> User:
    return _make_user(session, "ana@example.com", "customer")


@pytest.fixture
def other_customer(session) -> User:
    return _make_user(session, "bruno@example.com", "customer")


@pytest.fixture
def admin(session) -> User:
    return _make_user(session, "admin@barbearia.com", "admin")


@pytest.fixture
def barber(session) -> Barber:
    barber = Barber(name="Carlos")
    session.add(barber)
    session.commit()
    session.refresh(barber)
    return barber


@pytest.fixture
def inactive_barber(session) -> Barber:
    barber = Barber(name="Diego", active=False)
    session.add(barber)
    session.commit()
    session.refresh(barber)
    return barber


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": user.email})
    return {"Authorization": f"Bearer {token}"}
