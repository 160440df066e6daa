import pytest

from authdash import create_app
from authdash.config import TestConfig
from authdash.extensions import db
from authdash.models import User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Insert a user directly and return its id."""
    def _make_user(username='alice', email='alice@example.com', password='secret123', is_admin=False):
        with app.app_context():
            user = User(username=username, email=email, is_admin=is_admin)
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture()
def login(client):
    def _login(email='alice@example.com', password='secret123'):
        return client.post('/login', data={'email': email, 'password': password})
    return _login
