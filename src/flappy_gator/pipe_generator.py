"""
pipe_generator.py: Spawns, scrolls and retires pipe pairs.
"""

import logging
import random
from typing import List, Optional

from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED,
    PIPE_SPAWN_INTERVAL, MIN_GAP_Y, GAP_Y_BOTTOM_MARGIN
)
from .data_models import Pipe
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class PipeGenerator:
    """
    Owns the live pipes for one session.
    Pipes enter at the right edge every spawn_interval frames and are
    dropped once they have fully left the screen on the left.
    """

    def __init__(self, canvas_width: float = CANVAS_WIDTH, canvas_height: float = CANVAS_HEIGHT,
                 rng: Optional[random.Random] = None):
        if canvas_width <= 0:
            raise ConfigurationError(f"Canvas width must be positive, got {canvas_width}")

        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

        self.pipe_width = PIPE_WIDTH
        self.gap_height = PIPE_GAP
        self.scroll_speed = PIPE_SPEED
        self.spawn_interval = PIPE_SPAWN_INTERVAL

        self.min_gap_y = MIN_GAP_Y
        self.max_gap_y = canvas_height - GAP_Y_BOTTOM_MARGIN
        if self.max_gap_y <= self.min_gap_y:
            raise ConfigurationError(
                f"Canvas height {canvas_height} leaves no room for a gap "
                f"(needs more than {MIN_GAP_Y + GAP_Y_BOTTOM_MARGIN})")

        self.rng = rng or random.Random()
        self.pipes: List[Pipe] = []
        self.frame_count = 0

    def generate_pipe(self) -> Pipe:
        """Appends a new pipe at the right edge with a random gap center."""
        gap_y = self.rng.uniform(self.min_gap_y, self.max_gap_y)
        # uniform() may round past the upper bound for some float inputs
        gap_y = min(max(gap_y, self.min_gap_y), self.max_gap_y)

        pipe = Pipe(x=float(self.canvas_width), gap_y=gap_y,
                    width=self.pipe_width, gap_height=self.gap_height)
        self.pipes.append(pipe)
        return pipe

    def update_pipes(self, scroll_speed: Optional[float] = None) -> List[Pipe]:
        """
        One playing frame: scroll, retire off-screen pipes, then spawn on
        every spawn_interval boundary of the frame counter.
        """
        speed = self.scroll_speed if scroll_speed is None else scroll_speed
        self.frame_count += 1

        for pipe in self.pipes:
            pipe.x -= speed

        self.pipes = [p for p in self.pipes if not p.x < -p.width]

        if self.frame_count % self.spawn_interval == 0:
            self.generate_pipe()

        return self.pipes

    def reset(self):
        self.pipes = []
        self.frame_count = 0

    def seed(self) -> List[Pipe]:
        """Fresh session: no pipes, counter at zero, then one pipe to fly at."""
        self.reset()
        self.generate_pipe()
        logger.debug("Pipe generator seeded, gap range [%s, %s]", self.min_gap_y, self.max_gap_y)
        return self.pipes
