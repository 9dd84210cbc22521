import random

from conftest import TestConfig
from hub import create_app


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_live_rooms(client, sio_factory):
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}
    host = sio_factory()
    host.emit('createRoom', {'gameKind': 'draw'}, namespace='/')
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 1}
    host.disconnect(namespace='/')
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}


def test_seeded_rng_gives_repeatable_codes():
    class SeededConfig(TestConfig):
        ROOM_CODE_RNG = random.Random(99)

    app = create_app(SeededConfig)
    allocator = app.extensions['room_registry'].allocator
    expected = random.Random(99)
    assert allocator.allocate(set()) == str(expected.randint(1000, 9999))
