"""
Pytest configuration and fixtures
"""
import os
import shutil

from helpers import ADMIN_KEY, UPLOAD_ROOT

# Settings are read at import time, so the environment is prepared first
os.environ["UPLOAD_DIR"] = UPLOAD_ROOT
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_KEY"] = ADMIN_KEY

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import igloo.models  # noqa: E402,F401
from igloo.config import settings  # noqa: E402
from igloo.database import Base, get_db  # noqa: E402


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def upload_dir(monkeypatch):
    """Empty upload directory and a known admin key for each test"""
    shutil.rmtree(UPLOAD_ROOT, ignore_errors=True)
    os.makedirs(UPLOAD_ROOT, exist_ok=True)
    monkeypatch.setattr(settings, "upload_dir", UPLOAD_ROOT)
    monkeypatch.setattr(settings, "admin_key", ADMIN_KEY)
    yield UPLOAD_ROOT


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the in-memory database"""
    from igloo.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"x-admin-key": ADMIN_KEY}
