import os
import sys
import pytest

# Ensure the backend root (containing the `quizroom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quizroom import create_app, socketio
from quizroom.services.trivia import TriviaCoordinator
from quizroom.services.trivia.broadcast import RecordingBroadcaster


MODERATOR_KEY = 'test-moderator-key'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:3000']
    SOCKETIO_NAMESPACE = '/ws'
    MODERATOR_PASSCODE = MODERATOR_KEY
    MODERATOR_PASSCODE_HASH = None
    # Cheapest cost bcrypt accepts; keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    MAX_NAME_LENGTH = 20
    MAX_QUESTION_LENGTH = 200
    MAX_ANSWER_LENGTH = 50


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Open any number of Socket.IO test clients on /ws."""
    opened = []

    def _open():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        opened.append(test_client)
        return test_client

    yield _open
    for test_client in opened:
        try:
            if test_client.is_connected('/ws'):
                test_client.disconnect(namespace='/ws')
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def coordinator(broadcaster):
    return TriviaCoordinator(broadcaster, clock=lambda: 1700000000.0)
