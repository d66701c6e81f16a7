"""Shared fixtures: repositories, a throwaway SQLite session and an HTTP client."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cardealer.data_access import InMemoryVehicleRepository, VehicleRepository
from cardealer.db.session import get_db
from cardealer.main import create_app
from cardealer.models import Base
from cardealer.services import VehicleService


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def memory_repo() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository()


@pytest.fixture
def sql_repo(db_session) -> VehicleRepository:
    return VehicleRepository(db_session)


@pytest.fixture(params=["memory_repo", "sql_repo"])
def repo(request):
    """Runs the test once per repository implementation."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def service(repo) -> VehicleService:
    return VehicleService(repo)


@pytest.fixture
def client(db_session) -> TestClient:
    app = create_app()

    def _get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_test_db
    return TestClient(app)
