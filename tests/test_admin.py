from urllib.parse import urlparse

import pytest
from sqlalchemy.exc import SQLAlchemyError

from authdash.extensions import db
from authdash.models import User


def redirect_path(response):
    assert response.status_code in (301, 302)
    return urlparse(response.headers['Location']).path


class BrokenQuery:
    def __getattr__(self, name):
        raise SQLAlchemyError('database unavailable')


class BrokenUser:
    query = BrokenQuery()


@pytest.fixture()
def admin_client(client, make_user, login):
    make_user(username='root', email='root@example.com', is_admin=True)
    login(email='root@example.com')
    return client


def is_admin(app, user_id):
    with app.app_context():
        return db.session.get(User, user_id).is_admin


@pytest.mark.parametrize('path', ['/admin', '/promote/1', '/demote/1'])
def test_anonymous_redirected_to_landing(client, path):
    r = client.get(path)
    assert redirect_path(r) == '/'


@pytest.mark.parametrize('path', ['/admin', '/promote/1', '/demote/1'])
def test_non_admin_redirected_to_dashboard(app, client, make_user, login, path):
    user_id = make_user()
    login()

    r = client.get(path)
    assert redirect_path(r) == '/dashboard'
    assert is_admin(app, user_id) is False


def test_admin_panel_lists_users(admin_client, make_user):
    make_user(username='bob', email='bob@example.com')

    r = admin_client.get('/admin')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'root@example.com' in body
    assert 'bob@example.com' in body


def test_promote_and_demote(app, admin_client, make_user):
    bob_id = make_user(username='bob', email='bob@example.com')

    r = admin_client.get(f'/promote/{bob_id}')
    assert redirect_path(r) == '/admin'
    assert is_admin(app, bob_id) is True

    r = admin_client.get(f'/demote/{bob_id}')
    assert redirect_path(r) == '/admin'
    assert is_admin(app, bob_id) is False


def test_promoted_user_gains_access(app, admin_client, make_user):
    bob_id = make_user(username='bob', email='bob@example.com')
    admin_client.get(f'/promote/{bob_id}')

    bob = app.test_client()
    bob.post('/login', data={'email': 'bob@example.com', 'password': 'secret123'})
    assert bob.get('/admin').status_code == 200


def test_demoting_self_revokes_access_immediately(app, admin_client):
    with app.app_context():
        root_id = User.query.filter_by(email='root@example.com').one().id

    admin_client.get(f'/demote/{root_id}')

    r = admin_client.get('/admin')
    assert redirect_path(r) == '/dashboard'


def test_unknown_user_id_is_a_noop(admin_client):
    r = admin_client.get('/promote/9999')
    assert redirect_path(r) == '/admin'


def test_non_numeric_user_id_is_not_found(admin_client):
    assert admin_client.get('/promote/abc').status_code == 404


def test_admin_panel_store_failure_renders_error(admin_client, monkeypatch):
    monkeypatch.setattr('authdash.admin.routes.User', BrokenUser)

    r = admin_client.get('/admin')
    assert r.status_code == 500
    assert 'An error occurred while fetching users' in r.get_data(as_text=True)


@pytest.mark.parametrize('action, message', [
    ('promote', 'An error occurred while promoting user'),
    ('demote', 'An error occurred while demoting user'),
])
def test_toggle_store_failure_renders_error(admin_client, monkeypatch, action, message):
    monkeypatch.setattr('authdash.admin.routes.User', BrokenUser)

    r = admin_client.get(f'/{action}/1')
    assert r.status_code == 500
    assert message in r.get_data(as_text=True)


def test_admin_check_store_failure_redirects_to_dashboard(app, admin_client, monkeypatch):
    with app.app_context():
        monkeypatch.setattr(User, 'query', BrokenQuery())

    r = admin_client.get('/admin')
    assert redirect_path(r) == '/dashboard'


def test_admin_gate_with_unknown_session_email(client):
    with client.session_transaction() as sess:
        sess['is_auth'] = True
        sess['user_email'] = 'ghost@example.com'

    r = client.get('/admin')
    assert redirect_path(r) == '/dashboard'
