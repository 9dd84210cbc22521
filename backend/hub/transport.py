import logging

from flask_socketio import join_room


class SocketIOTransport:
    """Connection primitives the room registry needs, backed by Flask-SocketIO.

    Channels are Socket.IO rooms. Sends are fire-and-forget: a failed delivery
    is logged and dropped so it cannot abort the handler that issued it.
    """

    def __init__(self, socketio, namespace='/', logger=None):
        self.socketio = socketio
        self.namespace = namespace
        self.logger = logger or logging.getLogger(__name__)

    def emit(self, sid, event, payload):
        self._send(event, payload, sid)

    def broadcast(self, channel, event, payload):
        self._send(event, payload, channel)

    def join_channel(self, sid, channel):
        join_room(channel, sid=sid, namespace=self.namespace)

    def close_channel(self, channel):
        try:
            self.socketio.close_room(channel, namespace=self.namespace)
        except Exception:
            self.logger.exception(f"[close-failed] channel={channel}")

    def _send(self, event, payload, to):
        try:
            self.socketio.emit(event, payload, to=to, namespace=self.namespace)
        except Exception:
            self.logger.exception(f"[send-dropped] event={event} to={to}")
