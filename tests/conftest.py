import pytest
from fastapi.testclient import TestClient

from landing.database.session import create_db_engine
from landing.database.store import WaitlistStore
from landing.main import create_app
from landing.services.registration import RegistrationService

OFFSET = 1240


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'waitlist.db'}"


@pytest.fixture
def store(database_url):
    store = WaitlistStore(create_db_engine(database_url))
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def service(store):
    return RegistrationService(store, display_offset=OFFSET)


@pytest.fixture
def client(database_url):
    app = create_app(database_url=database_url, display_offset=OFFSET)
    with TestClient(app) as client:
        yield client
