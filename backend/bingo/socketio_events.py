from flask import current_app, request
from flask_socketio import emit
from bingo import socketio
from bingo.services.games import GameCoordinator


def _coordinator() -> GameCoordinator:
    return current_app.extensions['bingo']


def _get_sid() -> str:
    return request.sid  # type: ignore


def _payload(data) -> dict:
    return data if isinstance(data, dict) else {}


def handle_connect():
    current_app.logger.info(f"New client connected: {_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"Socket {sid} disconnected")
    _coordinator().disconnect(sid)


def handle_create_room(data=None):
    name = _payload(data).get('name')
    _coordinator().create_room(_get_sid(), name)


def handle_join_room(data=None):
    data = _payload(data)
    room_code = data.get('roomCode')
    if not room_code:
        emit('error', 'roomCode is required')
        return
    _coordinator().join_room(_get_sid(), room_code, data.get('name'))


def handle_call_number(data=None):
    data = _payload(data)
    room_code = data.get('roomCode')
    if not room_code:
        return
    _coordinator().call_number(_get_sid(), room_code, data.get('number'))


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('create-room', handle_create_room, namespace=namespace)
    socketio.on_event('join-room', handle_join_room, namespace=namespace)
    socketio.on_event('call-number', handle_call_number, namespace=namespace)
