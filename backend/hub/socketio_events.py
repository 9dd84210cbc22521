from flask import current_app, request
from flask_socketio import emit
from hub import socketio
from hub.services.rooms import RoomCodeSpaceExhausted, RoomRegistry


def handle_connect():
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    outcome = _get_registry().handle_disconnect(sid)
    current_app.logger.info(f"[disconnect] sid={sid} outcome={outcome.value} reason={reason}")


def handle_create_room(data):
    game_kind = _payload(data).get('gameKind')
    if not game_kind:
        emit('error', {'message': 'gameKind is required'})
        return
    try:
        _get_registry().create_room(_get_sid(), game_kind)
    except RoomCodeSpaceExhausted as exc:
        current_app.logger.warning(f"[create-refused] sid={_get_sid()} capacity={exc.capacity}")
        emit('error', {'message': str(exc)})


def handle_join_room(data):
    data = _payload(data)
    room_code = data.get('roomCode')
    player_name = data.get('playerName')
    if room_code in (None, '') or not player_name:
        emit('error', {'message': 'roomCode and playerName are required'})
        return
    _get_registry().join_room(_get_sid(), str(room_code), str(player_name))


# ---- helpers ----

def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _get_registry() -> RoomRegistry:
    return current_app.extensions['room_registry']


def _payload(data) -> dict:
    return data if isinstance(data, dict) else {}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createRoom', handle_create_room, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
