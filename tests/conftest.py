"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seed companies, jobs and users
- Admin / regular user tokens
"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_token, get_password_hash
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from main import app


# In-memory SQLite by default (fast, isolated); set TEST_DATABASE_URL to run
# against PostgreSQL, which also enables the tests marked requires_postgres.
SQLALCHEMY_TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")

if SQLALCHEMY_TEST_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(SQLALCHEMY_TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def pytest_collection_modifyitems(config, items):
    """Skip tests that need PostgreSQL-only SQL (ILIKE) on other databases."""
    if engine.dialect.name == "postgresql":
        return
    skip_pg = pytest.mark.skip(reason="needs PostgreSQL (set TEST_DATABASE_URL)")
    for item in items:
        if "requires_postgres" in item.keywords:
            item.add_marker(skip_pg)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed(db_session):
    """
    Three companies (c1..c3), one job each and two users (u1, admin).

    Returns the job ids keyed by title.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db_session.flush()

    jobs = [
        Job(title="j1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="j2", salary=200, equity=0.2, company_handle="c2"),
        Job(title="j3", salary=300, equity=0, company_handle="c3"),
    ]
    db_session.add_all(jobs)

    db_session.add_all([
        User(username="u1", hashed_password=get_password_hash("password1"),
             first_name="U1F", last_name="U1L", email="user1@user.com", is_admin=False),
        User(username="admin", hashed_password=get_password_hash("password2"),
             first_name="AdF", last_name="AdL", email="admin@user.com", is_admin=True),
    ])
    db_session.commit()

    return {job.title: job.id for job in jobs}


@pytest.fixture
def u1_token():
    return create_token("u1", is_admin=False)


@pytest.fixture
def admin_token():
    return create_token("admin", is_admin=True)
