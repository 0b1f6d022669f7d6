import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so tests can import 'troupe_api' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time, so the test database must be chosen first
os.environ["DATABASE_URL"] = f"sqlite:///{ROOT / 'test_troupe.db'}"
os.environ["SECRET_KEY"] = "test-secret-key-for-troupe-backend-tests"
os.environ["JWT_EXPIRES_IN"] = "24h"
os.environ["ENVIRONMENT"] = "test"
os.environ["SESSION_CLEANUP_INTERVAL_MINUTES"] = "0"

from fastapi.testclient import TestClient

from troupe_api import crud
from troupe_api.db import Base, SessionLocal, engine
from troupe_api.main import app
from troupe_api.models import AdminSession, AdminType, Member


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from an empty schema
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def drop_session_table():
    """Simulate a deployment where the admin_sessions migration has not run yet"""
    def _drop():
        AdminSession.__table__.drop(bind=engine, checkfirst=True)
    return _drop


@pytest.fixture()
def make_admin(db):
    def _make(login_id="manager", password="secret-pw", name="Manager", admin_type=AdminType.NORMAL, member_id=None):
        return crud.create_admin(
            db,
            login_id=login_id,
            password=password,
            name=name,
            admin_type=admin_type,
            member_id=member_id,
        )
    return _make


@pytest.fixture()
def root_admin(make_admin):
    return make_admin(login_id="admin", password="root-pw", name="System Admin", admin_type=AdminType.SYSTEM)


@pytest.fixture()
def member(db):
    m = Member(name="Kim Haneul", phone="010-1234-5678", email="haneul@example.com")
    db.add(m)
    db.commit()
    db.refresh(m)
    return m


@pytest.fixture()
def login(client):
    def _login(login_id, password, headers=None):
        r = client.post('/api/v1/admin/login', json={'loginId': login_id, 'password': password}, headers=headers)
        assert r.status_code == 200, r.text
        return r.json()['token']
    return _login
