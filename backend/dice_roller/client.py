from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 5.0
DEFAULT_ROLL_DELAY_SEC = 1.0


class ApiError(RuntimeError):
    """Raised when the game server answers with an HTTP error."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Game API error {status_code}: {message}")
        self.status_code = status_code


class GameApiClient:
    """Thin HTTP client for the /api/games endpoints.

    Usage:
      api = GameApiClient("http://localhost:5000")
      game_id = api.start_game()
      result = api.roll_dice(game_id)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}/api/games{path}"
        logger.debug("Dice API %s %s", method, url)
        kwargs.setdefault("timeout", self.timeout)
        resp = self.session.request(method=method, url=url, **kwargs)
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = body.get("error", resp.text) if isinstance(body, dict) else resp.text
            raise ApiError(resp.status_code, message)
        return resp

    def start_game(self) -> str:
        return self._request("POST", "/start").json()["gameId"]

    def reset_game(self) -> Dict[str, Any]:
        return self._request("POST", "/reset").json()

    def roll_dice(self, game_id: Optional[str]) -> Dict[str, Any]:
        return self._request("POST", "/roll", json={"gameId": game_id}).json()

    def get_stats(self) -> Dict[str, Any]:
        return self._request("GET", "/stats").json()

    def get_history(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/history").json()


def _zeroed_stats() -> Dict[str, Any]:
    return {
        "totalGames": 0,
        "playerWins": 0,
        "computerWins": 0,
        "ties": 0,
        "playerWinRate": 0,
    }


class DiceRollerClient:
    """Local display state mirroring the last server responses.

    Holds no game rules: dice, winner and statistics always come from the
    server. Every failed call sets ``error`` to a short message and leaves
    the rest of the displayed state as it was.
    """

    def __init__(
        self,
        api: GameApiClient,
        roll_delay: float = DEFAULT_ROLL_DELAY_SEC,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api = api
        self.roll_delay = roll_delay
        self._sleep = sleep
        self._roll_guard = threading.Lock()

        self.player_dice: List[int] = [1, 1]
        self.computer_dice: List[int] = [1, 1]
        self.is_rolling = False
        self.winner: Optional[str] = None
        self.stats: Optional[Dict[str, Any]] = None
        self.history: List[Dict[str, Any]] = []
        self.game_id: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def player_total(self) -> int:
        return sum(self.player_dice)

    @property
    def computer_total(self) -> int:
        return sum(self.computer_dice)

    def load(self) -> None:
        """Start a game and pull the current numbers, as on first page load."""
        self.start_game()
        self.fetch_stats()
        self.fetch_history()

    def start_game(self) -> bool:
        try:
            self.game_id = self.api.start_game()
        except (ApiError, requests.RequestException) as exc:
            self.error = "Failed to start new game"
            logger.error("Error starting game: %s", exc)
            return False
        self.error = None
        return True

    def fetch_stats(self) -> bool:
        try:
            self.stats = self.api.get_stats()
        except (ApiError, requests.RequestException) as exc:
            self.error = "Failed to fetch game statistics"
            logger.error("Error fetching stats: %s", exc)
            return False
        self.error = None
        return True

    def fetch_history(self) -> bool:
        try:
            self.history = self.api.get_history()
        except (ApiError, requests.RequestException) as exc:
            self.error = "Failed to fetch game history"
            logger.error("Error fetching history: %s", exc)
            return False
        self.error = None
        return True

    def reset(self) -> bool:
        self.is_rolling = False
        self.winner = None
        self.error = None
        try:
            data = self.api.reset_game()
        except (ApiError, requests.RequestException) as exc:
            self.error = "Failed to reset game"
            logger.error("Error resetting game: %s", exc)
            return False
        self.game_id = data.get("gameId")
        self.player_dice = [1, 1]
        self.computer_dice = [1, 1]
        self.stats = _zeroed_stats()
        return True

    def roll(self) -> bool:
        """Roll once. Returns False when ignored or failed."""
        with self._roll_guard:
            if self.is_rolling:
                return False
            self.is_rolling = True
        self.error = None
        try:
            data = self.api.roll_dice(self.game_id)
            player_dice = list(data["playerDice"])
            computer_dice = list(data["computerDice"])
            winner = data["winner"]
        except (ApiError, requests.RequestException, KeyError, TypeError, ValueError) as exc:
            self.error = "Failed to roll dice"
            logger.error("Error rolling dice: %s", exc)
            self.is_rolling = False
            return False

        try:
            if self.roll_delay > 0:
                self._sleep(self.roll_delay)
            self.player_dice = player_dice
            self.computer_dice = computer_dice
            self.winner = winner
        finally:
            self.is_rolling = False
        self.fetch_stats()
        self.fetch_history()
        return True
