import os
import random
import sys
import pytest

# Ensure the backend root (containing the `hub` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hub import create_app, socketio
from hub.services.rooms import RoomCodeAllocator, RoomRegistry


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = ['*']
    SOCKETIO_NAMESPACE = '/'
    ROOM_CODE_MIN = 1000
    ROOM_CODE_MAX = 9999
    LOG_LEVEL = 'DEBUG'
    HOST = '127.0.0.1'
    PORT = 3000


class RecordingTransport:
    """Stands in for Socket.IO: tracks channel membership and every send."""

    def __init__(self):
        self.channels = {}
        self.sent = []

    def emit(self, sid, event, payload):
        self.sent.append((sid, event, payload))

    def join_channel(self, sid, channel):
        self.channels.setdefault(channel, [])
        if sid not in self.channels[channel]:
            self.channels[channel].append(sid)

    def broadcast(self, channel, event, payload):
        for sid in self.channels.get(channel, []):
            self.sent.append((sid, event, payload))

    def close_channel(self, channel):
        self.channels.pop(channel, None)

    def received(self, sid, event=None):
        return [
            (name, payload) for to, name, payload in self.sent
            if to == sid and (event is None or name == event)
        ]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def app_registry(flask_app):
    return flask_app.extensions['room_registry']


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def registry(transport):
    return RoomRegistry(transport, allocator=RoomCodeAllocator(rng=random.Random(1234)))
