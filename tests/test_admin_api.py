from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from troupe_api import crud
from troupe_api.main import app
from troupe_api.models import AdminType

from helpers import bearer, sessions_of


def _locked(*args, **kwargs):
    raise OperationalError('DELETE FROM admin_sessions', {}, Exception('database is locked'))


def test_me_returns_public_projection(client, make_admin, member, login):
    admin = make_admin(member_id=member.id)
    token = login('manager', 'secret-pw')

    r = client.get('/api/v1/admin/me', headers=bearer(token))
    assert r.status_code == 200
    assert r.json() == {
        'id': admin.id,
        'loginId': 'manager',
        'name': 'Manager',
        'adminType': 'NORMAL',
        'member': {'id': member.id, 'name': 'Kim Haneul', 'phone': '010-1234-5678', 'email': 'haneul@example.com'},
    }


def test_list_admins_skips_soft_deleted(client, make_admin, root_admin, login):
    make_admin()
    make_admin(login_id='retired', name='Retired')
    token = login('admin', 'root-pw')

    retired_id = [a['id'] for a in client.get('/api/v1/admin', headers=bearer(token)).json() if a['loginId'] == 'retired'][0]
    assert client.delete(f'/api/v1/admin/{retired_id}', headers=bearer(token)).status_code == 200

    r = client.get('/api/v1/admin', headers=bearer(token))
    assert r.status_code == 200
    assert [a['loginId'] for a in r.json()] == ['admin', 'manager']
    assert all('passwordHash' not in a for a in r.json())


def test_get_admin_by_id(client, make_admin, login):
    admin = make_admin()
    token = login('manager', 'secret-pw')

    r = client.get(f'/api/v1/admin/{admin.id}', headers=bearer(token))
    assert r.status_code == 200
    data = r.json()
    assert data['loginId'] == 'manager'
    assert data['memberId'] is None
    assert data['createdAt']

    r = client.get('/api/v1/admin/9999', headers=bearer(token))
    assert r.status_code == 404
    assert r.json() == {'success': False, 'error': 'Admin not found'}


def test_create_admin_is_always_normal(client, make_admin, member, login):
    make_admin()
    token = login('manager', 'secret-pw')

    r = client.post(
        '/api/v1/admin',
        json={'loginId': 'stagehand', 'password': 'rig-pw', 'name': 'Stagehand', 'memberId': member.id, 'adminType': 'SYSTEM'},
        headers=bearer(token),
    )
    assert r.status_code == 201
    data = r.json()
    assert data['loginId'] == 'stagehand'
    assert data['adminType'] == 'NORMAL'
    assert data['memberId'] == member.id

    # the new account can log in
    login('stagehand', 'rig-pw')


def test_create_admin_validation(client, make_admin, login):
    make_admin()
    token = login('manager', 'secret-pw')

    r = client.post('/api/v1/admin', json={'loginId': 'x', 'name': 'X'}, headers=bearer(token))
    assert r.status_code == 400
    assert r.json()['error'] == 'Login ID, password, and name are required'

    r = client.post('/api/v1/admin', json={'loginId': 'manager', 'password': 'pw', 'name': 'Dup'}, headers=bearer(token))
    assert r.status_code == 409
    assert r.json() == {'success': False, 'error': 'Login ID already exists'}

    r = client.post('/api/v1/admin', json={'loginId': 'y', 'password': 'pw', 'name': 'Y', 'memberId': 4242}, headers=bearer(token))
    assert r.status_code == 404
    assert r.json()['error'] == 'Member not found'


def test_create_admin_requires_auth(client):
    r = client.post('/api/v1/admin', json={'loginId': 'x', 'password': 'pw', 'name': 'X'})
    assert r.status_code == 401


def test_update_name_and_password(client, make_admin, login):
    admin = make_admin()
    token = login('manager', 'secret-pw')

    r = client.put(f'/api/v1/admin/{admin.id}', json={'name': 'Stage Manager', 'password': 'new-pw'}, headers=bearer(token))
    assert r.status_code == 200
    assert r.json()['name'] == 'Stage Manager'

    r = client.post('/api/v1/admin/login', json={'loginId': 'manager', 'password': 'secret-pw'})
    assert r.status_code == 401
    login('manager', 'new-pw')


def test_update_member_link(client, make_admin, member, login):
    admin = make_admin()
    token = login('manager', 'secret-pw')

    r = client.put(f'/api/v1/admin/{admin.id}', json={'memberId': member.id}, headers=bearer(token))
    assert r.status_code == 200
    assert r.json()['member']['name'] == 'Kim Haneul'

    r = client.put(f'/api/v1/admin/{admin.id}', json={'memberId': 4242}, headers=bearer(token))
    assert r.status_code == 404

    r = client.put(f'/api/v1/admin/{admin.id}', json={'memberId': None}, headers=bearer(token))
    assert r.status_code == 200
    assert r.json()['memberId'] is None
    assert r.json()['member'] is None


def test_normal_admin_cannot_touch_root_account(client, make_admin, root_admin, login):
    make_admin()
    token = login('manager', 'secret-pw')

    r = client.put(f'/api/v1/admin/{root_admin.id}', json={'name': 'Hijacked'}, headers=bearer(token))
    assert r.status_code == 403
    assert r.json()['success'] is False

    r = client.delete(f'/api/v1/admin/{root_admin.id}', headers=bearer(token))
    assert r.status_code == 403


def test_root_account_type_is_fixed(client, root_admin, login):
    token = login('admin', 'root-pw')

    r = client.put(f'/api/v1/admin/{root_admin.id}', json={'adminType': 'NORMAL'}, headers=bearer(token))
    assert r.status_code == 400
    assert r.json()['error'] == 'Cannot change admin account type'

    r = client.put(f'/api/v1/admin/{root_admin.id}', json={'name': 'Root'}, headers=bearer(token))
    assert r.status_code == 200
    assert r.json()['adminType'] == 'SYSTEM'


def test_only_system_admin_changes_admin_type(client, make_admin, root_admin, login):
    normal = make_admin()
    other = make_admin(login_id='other', name='Other')
    normal_token = login('manager', 'secret-pw')
    root_token = login('admin', 'root-pw')

    r = client.put(f'/api/v1/admin/{normal.id}', json={'adminType': 'SYSTEM'}, headers=bearer(normal_token))
    assert r.status_code == 403

    r = client.put(f'/api/v1/admin/{other.id}', json={'adminType': 'SYSTEM'}, headers=bearer(root_token))
    assert r.status_code == 200
    assert r.json()['adminType'] == AdminType.SYSTEM.value


def test_delete_admin_soft_deletes_and_revokes_sessions(client, db, make_admin, root_admin, login):
    target = make_admin()
    login('manager', 'secret-pw')
    assert len(sessions_of(db, target.id)) == 1
    root_token = login('admin', 'root-pw')

    r = client.delete(f'/api/v1/admin/{target.id}', headers=bearer(root_token))
    assert r.status_code == 200
    assert r.json() == {'message': 'Admin deleted successfully'}

    assert sessions_of(db, target.id) == []
    db.refresh(target)
    assert target.deleted_at is not None

    assert client.get(f'/api/v1/admin/{target.id}', headers=bearer(root_token)).status_code == 404
    r = client.post('/api/v1/admin/login', json={'loginId': 'manager', 'password': 'secret-pw'})
    assert r.status_code == 401


def test_revoke_sessions_of_unknown_admin(client, root_admin, login):
    token = login('admin', 'root-pw')
    r = client.delete('/api/v1/admin/9999/sessions', headers=bearer(token))
    assert r.status_code == 404


def test_delete_admin_succeeds_when_session_revoke_fails(client, db, make_admin, root_admin, login, monkeypatch):
    target = make_admin()
    root_token = login('admin', 'root-pw')
    monkeypatch.setattr(crud, 'delete_sessions_for_admin', _locked)

    r = client.delete(f'/api/v1/admin/{target.id}', headers=bearer(root_token))
    assert r.status_code == 200
    assert r.json() == {'message': 'Admin deleted successfully'}

    db.refresh(target)
    assert target.deleted_at is not None


def test_force_logout_reports_session_store_errors(make_admin, root_admin, login, monkeypatch):
    target = make_admin()
    root_token = login('admin', 'root-pw')
    monkeypatch.setattr(crud, 'delete_sessions_for_admin', _locked)

    r = TestClient(app, raise_server_exceptions=False).delete(
        f'/api/v1/admin/{target.id}/sessions', headers=bearer(root_token)
    )
    assert r.status_code == 500
    assert r.json()['success'] is False
