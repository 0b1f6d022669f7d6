import importlib.util
from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from troupe_api import crud
from troupe_api.core import jobs
from troupe_api.core.session_cleanup import cleanup_expired_sessions

from helpers import ROOT, add_session, sessions_of


def _load_cron_script():
    spec = importlib.util.spec_from_file_location(
        'session_cleanup_cron', ROOT / 'scripts' / 'session_cleanup_cron.py'
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cleanup_removes_only_expired_sessions(db, make_admin):
    alice = make_admin(login_id='alice', name='Alice')
    bob = make_admin(login_id='bob', name='Bob')
    add_session(db, alice.id, 'expired-1', expires_in=timedelta(minutes=-5))
    add_session(db, bob.id, 'expired-2', expires_in=timedelta(days=-1))
    add_session(db, bob.id, 'live', expires_in=timedelta(hours=2))

    assert cleanup_expired_sessions(db) == 2

    assert sessions_of(db, alice.id) == []
    assert [s.token for s in sessions_of(db, bob.id)] == ['live']


def test_cleanup_opens_its_own_session(db, make_admin):
    admin = make_admin()
    add_session(db, admin.id, 'stale', expires_in=timedelta(hours=-1))

    assert cleanup_expired_sessions() == 1
    assert sessions_of(db, admin.id) == []


def test_cleanup_with_nothing_expired(db, make_admin):
    admin = make_admin()
    add_session(db, admin.id, 'live')
    assert cleanup_expired_sessions(db) == 0


def test_cleanup_without_session_table_returns_zero(db, drop_session_table):
    drop_session_table()
    assert cleanup_expired_sessions(db) == 0


def test_cleanup_database_error_returns_zero(db, monkeypatch):
    def locked(*args, **kwargs):
        raise OperationalError('DELETE FROM admin_sessions', {}, Exception('database is locked'))

    monkeypatch.setattr(crud, 'delete_expired_sessions', locked)
    assert cleanup_expired_sessions(db) == 0


def test_cleanup_unexpected_error_propagates(db, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError('boom')

    monkeypatch.setattr(crud, 'delete_expired_sessions', broken)
    with pytest.raises(RuntimeError):
        cleanup_expired_sessions(db)


def test_cron_script_exit_status(db, make_admin, monkeypatch):
    cron = _load_cron_script()
    admin = make_admin()
    add_session(db, admin.id, 'stale', expires_in=timedelta(hours=-1))

    assert cron.main() == 0
    assert sessions_of(db, admin.id) == []

    def broken():
        raise RuntimeError('boom')

    monkeypatch.setattr(cron, 'cleanup_expired_sessions', broken)
    assert cron.main() == 1


def test_cron_script_without_session_table(drop_session_table):
    cron = _load_cron_script()
    drop_session_table()
    assert cron.main() == 0


def test_scheduler_disabled_when_interval_is_zero():
    assert jobs.create_scheduler(0) is None


def test_scheduler_registers_cleanup_job():
    scheduler = jobs.create_scheduler(5)
    assert scheduler is not None
    assert not scheduler.running

    scheduled = scheduler.get_jobs()
    assert [job.id for job in scheduled] == [jobs.CLEANUP_JOB_ID]
    assert scheduled[0].trigger.interval == timedelta(minutes=5)


def test_scheduled_job_logs_and_swallows_errors(monkeypatch, caplog):
    def broken():
        raise RuntimeError('boom')

    monkeypatch.setattr(jobs, 'cleanup_expired_sessions', broken)
    jobs.run_cleanup_job()
    assert 'Session cleanup job failed' in caplog.text
