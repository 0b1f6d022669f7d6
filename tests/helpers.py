"""Shared helpers for the API tests."""

from datetime import datetime, timedelta
from pathlib import Path

from troupe_api import crud
from troupe_api.models import AdminLoginLog, AdminSession

ROOT = Path(__file__).resolve().parents[1]


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


def sessions_of(db, admin_id):
    db.expire_all()
    return db.query(AdminSession).filter(AdminSession.admin_id == admin_id).all()


def login_logs(db):
    db.expire_all()
    return db.query(AdminLoginLog).order_by(AdminLoginLog.id).all()


def add_session(db, admin_id, token, expires_in=timedelta(hours=1)):
    return crud.create_session(db, admin_id=admin_id, token=token, expires_at=datetime.utcnow() + expires_in)
