from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _parse_origins(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    value = (value or '*').strip()
    if value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    # Core service loggers live under the 'bingo' logger and inherit this level
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _parse_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app; handlers reach it through current_app.extensions
    from bingo.gateway import SocketIOGateway
    from bingo.services.games import GameCoordinator, RoomRegistry
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    registry = RoomRegistry(lines_to_win=flask_app.config.get('LINES_TO_WIN', 5))
    flask_app.extensions['bingo'] = GameCoordinator(registry, SocketIOGateway(socketio, namespace))

    from bingo.main import main
    flask_app.register_blueprint(main)

    from bingo.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
