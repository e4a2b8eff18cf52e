"""
game_engine.py: Flappy Gator game orchestration.

Owns the session, runs the per-frame update in a fixed order
(physics, pipes, collision, score) and applies user actions through
the state machine.
"""

import logging
import random
from typing import Optional

from .audio_manager import AudioManager
from .collision import CollisionDetector
from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, FLAPPY_GAME_ID, DEFAULT_PLAYER_NAME,
    FLAP_ANIMATION_FRAMES, SOUND_VOLUMES
)
from .data_models import CollisionResult, GameState, SessionState
from .errors import InvalidTransition
from .frame_clock import FrameClock
from .physics_core import PhysicsCore
from .pipe_generator import PipeGenerator
from .scoring import ScoreTracker, run_in_background
from .state_machine import GameStateMachine

logger = logging.getLogger(__name__)


class FlappyGatorGame:
    def __init__(self, canvas_width: float = CANVAS_WIDTH, canvas_height: float = CANVAS_HEIGHT,
                 client=None, audio: Optional[AudioManager] = None,
                 player_name: str = DEFAULT_PLAYER_NAME, game_id: str = FLAPPY_GAME_ID,
                 rng: Optional[random.Random] = None, dispatch=run_in_background,
                 clock: Optional[FrameClock] = None):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

        # Raises ConfigurationError before any other state exists
        self.pipe_generator = PipeGenerator(canvas_width, canvas_height, rng=rng)

        self.session = SessionState(canvas_height=canvas_height)
        self.physics = PhysicsCore()
        self.collision_detector = CollisionDetector(
            canvas_height, player_height=self.session.player.height)
        self.score_tracker = ScoreTracker(
            self.session, client, game_id=game_id, player_name=player_name, dispatch=dispatch)
        self.state_machine = GameStateMachine()

        self.audio = audio or AudioManager()
        self.clock = clock or FrameClock()
        self.running = True

    @property
    def state(self) -> GameState:
        return self.session.state

    def _fire(self, action: str, **data) -> bool:
        try:
            self.state_machine.fire(action, **data)
        except InvalidTransition as e:
            logger.warning("Ignoring %s: %s", action, e)
            return False
        self.session.state = self.state_machine.current
        return True

    def _new_round(self):
        self.session.reset()
        self.session.pipes = self.pipe_generator.seed()
        self.collision_detector.reset()
        self.clock.reset()

    # ----------------- User actions -----------------

    def start(self) -> bool:
        if not self._fire("start"):
            return False
        self._new_round()
        self.score_tracker.refresh_high_score()
        return True

    def restart(self) -> bool:
        if not self._fire("restart", previous_score=self.session.score):
            return False
        self._new_round()
        self.score_tracker.refresh_high_score()
        return True

    def pause(self) -> bool:
        return self._fire("pause")

    def resume(self) -> bool:
        if not self._fire("resume"):
            return False
        # Elapsed time during the pause must not reach the physics step
        self.clock.reset()
        return True

    def toggle_pause(self) -> bool:
        if self.state is GameState.PAUSED:
            return self.resume()
        return self.pause()

    def handle_input(self) -> bool:
        """A flap. Only honoured while playing; discarded otherwise."""
        if self.session.state is not GameState.PLAYING:
            return False

        player = self.session.player
        self.physics.apply_flap(player)
        player.is_flapping = True
        player.flap_frames = FLAP_ANIMATION_FRAMES
        self.audio.play_sound("flap", SOUND_VOLUMES["flap"])
        return True

    # ----------------- Frame update -----------------

    def _tick_flap_animation(self):
        player = self.session.player
        if player.flap_frames > 0:
            player.flap_frames -= 1
            if player.flap_frames == 0:
                player.is_flapping = False

    def step_frame(self, delta_time: float = 1.0) -> Optional[CollisionResult]:
        """
        Advances one playing frame. Returns the collision result, or None when
        the game is not being played. A collision ends the frame immediately:
        the gator stays where it hit and nothing is scored.
        """
        session = self.session
        if session.state is not GameState.PLAYING:
            return None

        session.frame_count += 1

        self.physics.step(session.player, delta_time)
        self._tick_flap_animation()

        session.pipes = self.pipe_generator.update_pipes(
            self.pipe_generator.scroll_speed * delta_time)

        result = self.collision_detector.evaluate(session.player, session.pipes)
        if result.collision:
            self.game_over(result)
            return result

        gained = self.score_tracker.update()
        if gained:
            self.audio.play_sound("score", SOUND_VOLUMES["score"])
        return result

    def tick(self) -> Optional[CollisionResult]:
        """step_frame with a delta measured by the frame clock."""
        if self.session.state is not GameState.PLAYING:
            return None
        return self.step_frame(self.clock.tick())

    def game_over(self, result: CollisionResult):
        session = self.session
        if not self._fire("collide", cause=result.type, final_score=session.score):
            return

        session.last_collision = result
        session.best_score = max(session.best_score, session.score)
        logger.info("Game over: hit %s with score %d", result.type, session.score)

        self.audio.play_sound("collision", SOUND_VOLUMES["collision"])
        self.score_tracker.submit_final_score(session.score)

    def destroy(self):
        self.running = False
