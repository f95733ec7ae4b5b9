"""Game domain services: dice, scoring and session state.

This package contains pure domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from flask import current_app

from .session import GameNotFound, GameSession

EXTENSION_KEY = 'dice_roller'


def get_game_session() -> GameSession:
    """Return the session state owned by the current Flask app."""
    return current_app.extensions[EXTENSION_KEY]
