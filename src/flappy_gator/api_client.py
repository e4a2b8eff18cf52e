"""
api_client.py: HTTP client for the shared high-score service.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .constants import DEFAULT_API_URL, REQUEST_TIMEOUT
from .data_models import HighScoreEntry, SubmitResult
from .errors import TransientServiceError

logger = logging.getLogger(__name__)


class ScoreServiceClient:
    """
    Talks to the score backend shared by every game in the arcade.
    Scores are partitioned by game_type, so each game passes its own id.

    Every transport, HTTP or decoding failure surfaces as
    TransientServiceError; callers decide how to fall back.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise TransientServiceError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise TransientServiceError(f"{method} {path} returned invalid JSON: {e}") from e

    @staticmethod
    def _decode(path: str, parse, data):
        try:
            return parse(data)
        except (AttributeError, TypeError, ValueError, KeyError) as e:
            raise TransientServiceError(f"{path} returned an unexpected payload: {e}") from e

    @staticmethod
    def _expect(path: str, data, kind: type):
        if not isinstance(data, kind):
            raise TransientServiceError(
                f"{path} returned {type(data).__name__}, expected {kind.__name__}")
        return data

    def get_high_scores(self, game_type: Optional[str] = None) -> List[HighScoreEntry]:
        """Top scores, best first, optionally limited to one game."""
        params = {"game_type": game_type} if game_type else None
        data = self._expect("/api/highscores",
                            self._request("GET", "/api/highscores", params=params), list)

        entries = self._decode("/api/highscores",
                               lambda items: [HighScoreEntry.from_json(item) for item in items], data)
        if game_type:
            # Older backends ignore the query parameter
            entries = [e for e in entries if e.game_type == game_type]
        entries.sort(key=lambda e: e.score, reverse=True)
        return entries

    def submit_score(self, game_type: str, player_name: str, score: int) -> SubmitResult:
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise ValueError(f"Score must be a non-negative integer, got {score!r}")

        data = self._request("POST", "/api/highscores", json={
            "game_type": game_type,
            "name": player_name,
            "score": score,
        })
        return self._decode("/api/highscores", SubmitResult.from_json,
                            self._expect("/api/highscores", data, dict))

    def get_history(self, game_type: Optional[str] = None) -> List[Dict]:
        params = {"game_type": game_type} if game_type else None
        history = self._expect("/api/history",
                               self._request("GET", "/api/history", params=params), list)
        if game_type:
            history = self._decode(
                "/api/history",
                lambda rows: [h for h in rows if h.get("game_type") == game_type], history)
        return history

    def update_score_name(self, score_id: int, player_name: str) -> SubmitResult:
        path = f"/api/highscores/{score_id}"
        data = self._request("PUT", path, json={"name": player_name})
        return self._decode(path, SubmitResult.from_json, self._expect(path, data, dict))

    def get_stats(self, game_type: str) -> Dict[str, float]:
        """Aggregate stats: highScore, totalGamesPlayed, totalScore, averageScore."""
        data = self._expect("/api/stats",
                            self._request("GET", "/api/stats", params={"game_type": game_type}), dict)
        return {
            "highScore": data.get("highScore", 0),
            "totalGamesPlayed": data.get("totalGamesPlayed", 0),
            "totalScore": data.get("totalScore", 0),
            "averageScore": data.get("averageScore", 0),
        }

    def close(self):
        self.session.close()
