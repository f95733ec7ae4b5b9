import os
import sys
import pytest

# Ensure the backend root (containing the `dice_roller` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dice_roller import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5173']
    HISTORY_LIMIT = 10
    RANDOM_SEED = None
    DICE_API_URL = 'http://dice.test'
    CLIENT_TIMEOUT_SEC = 1
    ROLL_DISPLAY_DELAY_SEC = 0


class ScriptedRandom:
    """Stand-in for random.Random that returns queued faces in order.

    Each roll consumes four faces: player pair first, then computer pair.
    """

    def __init__(self, *faces):
        self.faces = list(faces)

    def queue(self, *faces):
        self.faces.extend(faces)

    def randint(self, a, b):
        if not self.faces:
            raise AssertionError('ScriptedRandom ran out of faces')
        value = self.faces.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture()
def rng():
    return ScriptedRandom()


@pytest.fixture()
def flask_app(rng):
    application = create_app(TestConfig, rng=rng)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
