import pytest

from contactdesk import create_app
from contactdesk.config import TestingConfig, config
from contactdesk.services import ContactService
from contactdesk.store import store as contact_store


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    contact_store.connect()
    return contact_store


@pytest.fixture
def service(app):
    return ContactService(contact_store)


@pytest.fixture
def ann():
    return {
        'name': 'Ann',
        'email': 'ann@x.com',
        'subject': 'Hi',
        'message': 'Hello there',
    }


class UnreachableConfig(TestingConfig):
    SQLALCHEMY_DATABASE_URI = 'sqlite:////nonexistent-directory/contactdesk.db'


@pytest.fixture
def unreachable_app(monkeypatch):
    monkeypatch.setitem(config, 'unreachable', UnreachableConfig)
    app = create_app('unreachable')
    with app.app_context():
        yield app
