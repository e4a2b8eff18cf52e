"""
physics_core.py: Deterministic frame-based kinematics for the gator.
"""

import math

from .constants import (
    GRAVITY, FLAP_STRENGTH, TERMINAL_VELOCITY, ROTATION_FACTOR, MAX_ROTATION,
    CANVAS_HEIGHT
)
from .data_models import Player


class PhysicsCore:
    """
    Advances one entity under constant gravity.
    Units are pixels and frames; delta_time is measured in frames.
    """

    def __init__(self, gravity: float = GRAVITY, flap_strength: float = FLAP_STRENGTH,
                 terminal_velocity: float = TERMINAL_VELOCITY):
        self.gravity = gravity
        self.flap_strength = flap_strength
        self.terminal_velocity = terminal_velocity

    def apply_gravity(self, entity: Player):
        # Only the downward side is clamped; upward speed comes from flaps alone.
        velocity = min(entity.velocity + self.gravity, self.terminal_velocity)
        entity.velocity = round(velocity, 4)

    def apply_flap(self, entity: Player):
        entity.velocity = self.flap_strength

    def update_position(self, entity: Player, delta_time: float = 1.0):
        entity.y = round(entity.y + entity.velocity * delta_time, 4)

    @staticmethod
    def rotation_for(velocity: float) -> float:
        """Tilt in degrees for a velocity. Purely a rendering hint."""
        rotation = velocity * ROTATION_FACTOR
        if not math.isfinite(rotation):
            return 0.0
        return max(-MAX_ROTATION, min(MAX_ROTATION, rotation))

    def update_rotation(self, entity: Player):
        entity.rotation = self.rotation_for(entity.velocity)

    def step(self, entity: Player, delta_time: float = 1.0):
        """One frame: gravity, movement, then the derived rotation."""
        self.apply_gravity(entity)
        self.update_position(entity, delta_time)
        self.update_rotation(entity)

    def respawn(self, entity: Player, canvas_height: float = CANVAS_HEIGHT):
        entity.y = canvas_height / 2
        entity.velocity = 0.0
        entity.rotation = 0.0
        entity.is_flapping = False
        entity.flap_frames = 0
