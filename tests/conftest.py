"""Shared test fixtures and helpers."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from booking_agent.db.init_db import init_db
from booking_agent.db.models import Business
from booking_agent.db.session import get_db
from main import app
from tests.payloads import ASSISTANT_ID, BUSINESS_PHONE


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, class_=Session)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def business(db):
    business = Business(
        name="Fade Factory",
        email="owner@fadefactory.test",
        address="12 Queen St W, Toronto",
        twilio_phone_number=BUSINESS_PHONE,
        vapi_assistant_id=ASSISTANT_ID,
    )
    db.add(business)
    db.commit()
    db.refresh(business)
    return business


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
