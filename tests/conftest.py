"""
Pytest configuration and shared fixtures.
"""

import os

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine, select

from jobly.core.security import create_token
from jobly.db.database import engine_options, get_session
from jobly.models.company import Company
from jobly.models.job import Job
from main import app


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test."""
    engine = create_engine("sqlite://", **engine_options("sqlite://"))
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Session on a database holding companies c1, c2 and jobs j1-j3."""
    with Session(db_engine) as session:
        session.add(Company(handle="c1", name="C1", num_employees=1, description="Desc1"))
        session.add(Company(handle="c2", name="C2", num_employees=2, description="Desc2"))
        session.add(Job(title="j1", salary=100, equity=Decimal("0.1"), company_handle="c1"))
        session.add(Job(title="j2", salary=200, equity=Decimal("0.1"), company_handle="c1"))
        session.add(Job(title="j3", salary=300, equity=None, company_handle="c2"))
        session.commit()
        yield session


@pytest.fixture
def job_ids(db_session):
    """Map of seeded job title to id."""
    return {job.title: job.id for job in db_session.exec(select(Job)).all()}


@pytest.fixture
def client(db_session):
    """Test client wired to the per-test database."""
    app.dependency_overrides[get_session] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_token({"username": "u1", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_token({"username": "u2", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}
