import os
import sys
import pytest

# Ensure the backend root (containing the `bingo` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from bingo import create_app, socketio
from helpers import RecordingGateway


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    LINES_TO_WIN = 5
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def gateway():
    return RecordingGateway()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def _connect(flask_app):
    return socketio.test_client(flask_app, flask_test_client=flask_app.test_client())


@pytest.fixture()
def sio_pair(flask_app):
    clients = [_connect(flask_app), _connect(flask_app)]
    yield clients
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()


@pytest.fixture()
def sio_third(flask_app):
    test_client = _connect(flask_app)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
