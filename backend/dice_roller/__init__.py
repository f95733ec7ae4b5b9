from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config, rng=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One session-state object per app; tests may inject their own dice source
    from dice_roller.services.games import EXTENSION_KEY, GameSession
    from dice_roller.services.games.dice import DiceRoller
    dice = DiceRoller(rng=rng) if rng is not None else DiceRoller.from_seed(flask_app.config.get('RANDOM_SEED'))
    flask_app.extensions[EXTENSION_KEY] = GameSession(
        dice=dice,
        history_limit=int(flask_app.config.get('HISTORY_LIMIT', 10)),
    )

    # Import and register blueprints here
    from dice_roller.main import main
    flask_app.register_blueprint(main)

    from dice_roller.api.games import games
    # Mount game routes under /api/games to match the client
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from dice_roller.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from dice_roller.cli import play_command
    flask_app.cli.add_command(play_command)

    return flask_app
