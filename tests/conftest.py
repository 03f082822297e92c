"""Shared pytest fixtures for unit and integration tests.

This module provides:
- An in-memory SQLite session seeded with providers and profiles
- A recording fake of the Resend send call, with scriptable failures
- An EmailService wired to that fake
- A FastAPI TestClient with the database and email dependencies overridden
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app import email_service as email_service_module
from app.database import Base, get_db, log_slow_lookups
from app.domain.notifications.router import get_email_service
from app.email_service import EmailService
from app.main import app
from app.models import Doctor, MedicalStore, Nurse, Profile
from tests.fixtures.doubles import FALLBACK_SENDER, PRIMARY_SENDER, FakeSender


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """In-memory marketplace database.

    Seeded rows:
    - doctor doc-1 with an email, doc-2 without one
    - nurses: two approved and emergency-available with email, one approved and
      emergency-available without email, one not emergency-available, one pending
    - pharmacy store-1 with an email
    - profile user-1 with an email
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    log_slow_lookups(engine)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()

    session.add_all(
        [
            Doctor(id="doc-1", full_name="Ayesha Khan", email="dr.ayesha@example.com", status="approved"),
            Doctor(id="doc-2", full_name="Bilal Ahmed", email=None, status="approved"),
            Nurse(id="nurse-1", full_name="Sara", email="sara@example.com", status="approved", emergency_available=True),
            Nurse(id="nurse-2", full_name="Hina", email="hina@example.com", status="approved", emergency_available=True),
            Nurse(id="nurse-3", full_name="Zara", email=None, status="approved", emergency_available=True),
            Nurse(id="nurse-4", full_name="Amna", email="amna@example.com", status="approved", emergency_available=False),
            Nurse(id="nurse-5", full_name="Rabia", email="rabia@example.com", status="pending", emergency_available=True),
            MedicalStore(id="store-1", name="City Pharmacy", email="orders@citypharmacy.example.com", status="approved"),
            Profile(user_id="user-1", full_name="Usman Tariq", email="usman@example.com"),
        ]
    )
    session.commit()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def fake_sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def plain_mjml(monkeypatch: pytest.MonkeyPatch) -> None:
    """Skip MJML compilation so dispatch tests only exercise routing logic."""
    monkeypatch.setattr(email_service_module, "compile_mjml_to_html", lambda mjml: mjml)


@pytest.fixture
def email_service(fake_sender: FakeSender, plain_mjml: None) -> EmailService:
    return EmailService(
        api_key="re_test",
        from_address=PRIMARY_SENDER,
        fallback_from_address=FALLBACK_SENDER,
        sender=fake_sender,
    )


@pytest.fixture
def client(db_session: Session, email_service: EmailService) -> Generator[TestClient, None, None]:
    """TestClient with the database and email service replaced by test doubles."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: email_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
