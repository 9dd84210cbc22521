import random

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS') or '*'
    if allowed_origins == ['*']:
        allowed_origins = '*'
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app; handlers reach it through current_app
    from hub.services.rooms import RoomCodeAllocator, RoomRegistry
    from hub.transport import SocketIOTransport

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    allocator = RoomCodeAllocator(
        low=int(flask_app.config.get('ROOM_CODE_MIN', 1000)),
        high=int(flask_app.config.get('ROOM_CODE_MAX', 9999)),
        rng=flask_app.config.get('ROOM_CODE_RNG') or random.Random(),
    )
    flask_app.extensions['room_registry'] = RoomRegistry(
        SocketIOTransport(socketio, namespace=namespace, logger=flask_app.logger),
        allocator=allocator,
        logger=flask_app.logger,
    )

    from hub.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from hub.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
