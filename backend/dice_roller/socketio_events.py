from flask_socketio import emit
from dice_roller import socketio
from dice_roller.services.games import get_game_session


def handle_connect(auth=None):
    # New displays get the current numbers straight away
    emit('connected', {'message': 'Connected to /ws', 'stats': get_game_session().stats_payload()})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
