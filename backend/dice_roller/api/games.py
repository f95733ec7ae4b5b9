from flask import Blueprint, jsonify, request, current_app
from dice_roller import socketio
from dice_roller.services.games import GameNotFound, get_game_session


games = Blueprint('games', __name__)


def _notify(kind: str, session) -> None:
    """Push fresh stats to every display connected on /ws."""
    socketio.emit('game_update', {'type': kind, 'stats': session.stats_payload()}, namespace='/ws')


@games.route('/start', methods=['POST'])
def start_game():
    session = get_game_session()
    game_id = session.start()
    current_app.logger.info(f"[start] game={game_id}")
    _notify('start', session)
    return jsonify({'gameId': game_id})


@games.route('/reset', methods=['POST'])
def reset_game():
    session = get_game_session()
    try:
        game_id, stats = session.reset()
    except GameNotFound as exc:
        current_app.logger.info("[reset] rejected: no active game")
        return jsonify({'error': str(exc)}), 404
    current_app.logger.info(f"[reset] session cleared, new game={game_id}")
    _notify('reset', session)
    return jsonify({
        'success': True,
        'gameId': game_id,
        'stats': stats.to_dict(),
        'message': 'Game reset successfully',
    })


@games.route('/roll', methods=['POST'])
def roll_dice():
    data = request.get_json(silent=True) or {}
    session = get_game_session()
    try:
        result = session.roll(data.get('gameId'))
    except GameNotFound as exc:
        current_app.logger.info("[roll] rejected: no active game")
        return jsonify({'error': str(exc)}), 404
    current_app.logger.info(
        f"[roll] player={result.player_dice} computer={result.computer_dice} winner={result.winner}"
    )
    _notify('roll', session)
    return jsonify(result.to_dict())


@games.route('/stats', methods=['GET'])
def get_stats():
    return jsonify(get_game_session().stats_payload())


@games.route('/history', methods=['GET'])
def get_history():
    return jsonify([entry.to_dict() for entry in get_game_session().history()])
