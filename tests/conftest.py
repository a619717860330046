# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

import usertask_api.models  # noqa: F401  (registers tables)
from usertask_api.config import Settings, get_settings
from usertask_api.db.config import build_engine, get_session
from usertask_api.services.account_service import AccountService
from usertask_api.services.task_service import TaskService
from usertask_api.services.token_service import TokenService


@pytest.fixture()
def settings() -> Settings:
    """
    Settings for tests.

    Low bcrypt cost keeps hashing fast; everything else mirrors production
    defaults so token and display behaviour is realistic.
    """
    return Settings(
        database_url="sqlite://",
        jwt_key="test-signing-key",
        jwt_issuer="UserTaskAPI",
        jwt_audience="UserTaskAPI",
        token_lifetime=timedelta(hours=1),
        bcrypt_rounds=4,
        display_timezone="Asia/Kolkata",
    )


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory SQLite shared across sessions via a single connection."""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture()
def token_service(settings: Settings) -> TokenService:
    return TokenService(settings)


@pytest.fixture()
def account_service(session: Session, token_service: TokenService, settings: Settings) -> AccountService:
    return AccountService(session, token_service, settings)


@pytest.fixture()
def task_service(session: Session) -> TaskService:
    return TaskService(session)


@pytest.fixture()
def client(engine: Engine, settings: Settings) -> Iterator[TestClient]:
    """
    TestClient wired to the in-memory database and test settings.

    NOTE: the client is not used as a context manager, so the startup hook
    (which targets the configured DATABASE_URL) does not run.
    """
    from usertask_api.main import app

    def override_session() -> Iterator[Session]:
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    """Register and log in a user, returning a bearer Authorization header."""
    client.post(
        "/api/users/register",
        json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
    )
    response = client.post(
        "/api/users/login", json={"email": "ann@x.com", "password": "secret1"}
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}
