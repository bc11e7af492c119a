import pytest

from app import create_app


@pytest.fixture(scope="function")
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "QUEUE_HISTORY_LIMIT": 5,
    })
    yield app


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def lab(app):
    return app.extensions["queue_lab"]
