import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.db.session import Database
from forum.deps import CurrentUser
from forum.main import create_app
from forum.models.user import User
from forum.services.auth import create_access_token, hash_password


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", jwt_secret="test-secret", log_level="WARNING")


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(client):
    db = client.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _add_user(db, username, email):
    user = User(
        username=username,
        firstname=username.title(),
        lastname="Tester",
        email=email,
        password=hash_password("password123"),
    )
    db.add(user)
    db.commit()
    return CurrentUser(userid=user.userid, username=user.username)


@pytest.fixture
def alice(db_session):
    return _add_user(db_session, "alice", "alice@example.com")


@pytest.fixture
def bob(db_session):
    return _add_user(db_session, "bob", "bob@example.com")


@pytest.fixture
def auth_headers(settings):
    def _headers(user):
        token = create_access_token(settings, user.userid, user.username)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def standalone_db(settings):
    """HTTP 없이 서비스 함수만 테스트할 때 쓰는 DB"""
    database = Database(settings)
    database.create_all()
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
        database.dispose()
