"""
collision.py: Circle hitbox against pipe rectangles and the world edges.
"""

import logging
import math
from typing import Iterable, Optional

from .constants import CANVAS_HEIGHT, GATOR_SIZE, GATOR_HITBOX_RADIUS
from .data_models import CollisionResult, Pipe, Player
from .errors import InvariantViolation

logger = logging.getLogger(__name__)


def _require_finite(value, what: str):
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvariantViolation(f"{what} must be a finite number, got {value!r}")


def circle_intersects_rect(cx: float, cy: float, radius: float,
                           rx: float, ry: float, rw: float, rh: float) -> bool:
    """Closest-point test: the circle hits when the nearest rect point is inside it."""
    closest_x = max(rx, min(cx, rx + rw))
    closest_y = max(ry, min(cy, ry + rh))
    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy < radius * radius


class CollisionDetector:
    def __init__(self, canvas_height: float = CANVAS_HEIGHT,
                 player_height: float = GATOR_SIZE,
                 hitbox_radius: float = GATOR_HITBOX_RADIUS):
        self.canvas_height = canvas_height
        self.player_height = player_height
        self.hitbox_radius = hitbox_radius

        self.last_collision_type: Optional[str] = None

    def _validate_pipe(self, pipe: Pipe):
        for name in ("x", "width", "gap_y", "gap_height"):
            _require_finite(getattr(pipe, name, None), f"Pipe.{name}")

    def check_pipe_collision(self, player_x: float, player_y: float,
                             pipes: Iterable[Pipe]) -> CollisionResult:
        """Tests the hitbox against the top then bottom section of each pipe."""
        _require_finite(player_x, "Player x")
        _require_finite(player_y, "Player y")
        r = self.hitbox_radius

        for pipe in pipes:
            self._validate_pipe(pipe)

            # Skip pipes the hitbox's bounding box does not overlap horizontally
            if player_x + r < pipe.x or player_x - r > pipe.x + pipe.width:
                continue

            top_height = pipe.top_height
            if circle_intersects_rect(player_x, player_y, r, pipe.x, 0, pipe.width, top_height):
                return self._register(CollisionResult(
                    collision=True, type="pipe-top", pipe=pipe,
                    impact_point=(player_x, top_height)))

            bottom_y = pipe.bottom_y
            bottom_height = self.canvas_height - bottom_y
            if circle_intersects_rect(player_x, player_y, r, pipe.x, bottom_y, pipe.width, bottom_height):
                return self._register(CollisionResult(
                    collision=True, type="pipe-bottom", pipe=pipe,
                    impact_point=(player_x, bottom_y)))

        return CollisionResult.none()

    def check_boundary_collision(self, player_y: float) -> CollisionResult:
        _require_finite(player_y, "Player y")

        if player_y < 0:
            return self._register(CollisionResult(
                collision=True, type="ceiling", impact_point=(0.0, 0.0)))

        ground = self.canvas_height - self.player_height
        if player_y > ground:
            return self._register(CollisionResult(
                collision=True, type="ground", impact_point=(0.0, ground)))

        return CollisionResult.none()

    def evaluate(self, player: Player, pipes: Iterable[Pipe]) -> CollisionResult:
        """
        Full check for one frame. A pipe hit is reported ahead of a boundary
        hit; either one ends the game.
        """
        pipe_result = self.check_pipe_collision(player.x, player.y, pipes)
        boundary_result = self.check_boundary_collision(player.y)

        if pipe_result.collision:
            self.last_collision_type = pipe_result.type
            return pipe_result
        return boundary_result

    def _register(self, result: CollisionResult) -> CollisionResult:
        self.last_collision_type = result.type
        logger.debug("Collision: %s at %s", result.type, result.impact_point)
        return result

    def reset(self):
        self.last_collision_type = None
