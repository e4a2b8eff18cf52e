"""
Flappy Gator: physics, pipes, collision and scoring for the arcade side-scroller.
"""

from .errors import (
    ConfigurationError, InvalidTransition, InvariantViolation, TransientServiceError
)
from .game_engine import FlappyGatorGame

__version__ = "1.0.0"
