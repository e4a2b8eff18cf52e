"""
scoring.py: Pass detection and high-score reconciliation with the score service.
"""

import logging
import threading
from typing import Callable, Optional

from .constants import FLAPPY_GAME_ID, DEFAULT_PLAYER_NAME, POINTS_PER_PIPE
from .data_models import SessionState
from .errors import TransientServiceError

logger = logging.getLogger(__name__)


def run_in_background(task: Callable[[], None]):
    """Default dispatcher: the frame loop never waits on the network."""
    thread = threading.Thread(target=task, daemon=True)
    thread.start()


class ScoreTracker:
    """
    Counts passed pipes for a session and keeps the cached high score in sync
    with the remote service.

    The cache is written from worker threads, so reads and writes go through
    state_lock. The latest successful response wins.
    """

    def __init__(self, session: SessionState, client=None, game_id: str = FLAPPY_GAME_ID,
                 player_name: str = DEFAULT_PLAYER_NAME,
                 dispatch: Callable[[Callable[[], None]], None] = run_in_background):
        self.session = session
        self.client = client
        self.game_id = game_id
        self.player_name = player_name
        self.dispatch = dispatch

        self.state_lock = threading.Lock()
        self.last_score_id: Optional[int] = None
        self.last_submit_ok: Optional[bool] = None

    @property
    def high_score(self) -> int:
        with self.state_lock:
            return self.session.high_score

    def _set_high_score(self, value: int):
        with self.state_lock:
            self.session.high_score = value

    def update(self) -> int:
        """Scores every pipe the gator has fully passed. Returns points gained."""
        player_x = self.session.player.x
        gained = 0

        for pipe in self.session.pipes:
            if not pipe.scored and pipe.x + pipe.width < player_x:
                pipe.scored = True
                gained += POINTS_PER_PIPE

        if gained:
            self.session.score += gained
            self.session.best_score = max(self.session.best_score, self.session.score)
        return gained

    # ----------------- Remote high score -----------------

    def _fetch_high_score(self) -> Optional[int]:
        entries = self.client.get_high_scores(self.game_id)
        return entries[0].score if entries else 0

    def _refresh(self):
        try:
            high_score = self._fetch_high_score()
        except TransientServiceError as e:
            logger.warning("High score fetch failed, keeping cached %d: %s", self.high_score, e)
            return
        self._set_high_score(high_score)

    def refresh_high_score(self):
        """Fire-and-forget fetch of the current remote high score."""
        if self.client is None:
            return
        self.dispatch(self._refresh)

    def _submit(self, score: int):
        try:
            result = self.client.submit_score(self.game_id, self.player_name, score)
        except TransientServiceError as e:
            logger.warning("Score submission failed, showing cached high score %d: %s",
                           self.high_score, e)
            self.last_submit_ok = False
            return

        self.last_submit_ok = result.success
        if not result.success:
            logger.warning("Score service rejected score %d: %s", score, result.error)
            return

        self.last_score_id = result.id
        if result.is_new_high_score:
            self._set_high_score(score)
        logger.info("Submitted score %d (new high score: %s)", score, result.is_new_high_score)

        self._refresh()

    def submit_final_score(self, score: int):
        """
        Called once per game over. Submits, then re-reads the leaderboard.
        A failure leaves the cached high score in place and is not retried.
        """
        if self.client is None:
            return
        self.dispatch(lambda: self._submit(score))
