"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    CANVAS_HEIGHT, GATOR_X, GATOR_SIZE, PIPE_WIDTH, PIPE_GAP
)


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass
class Player:
    """The gator. Only y, velocity and rotation change during play."""
    x: float = GATOR_X
    y: float = CANVAS_HEIGHT / 2
    velocity: float = 0.0
    rotation: float = 0.0
    width: int = GATOR_SIZE
    height: int = GATOR_SIZE

    # Animation hints, no effect on physics
    is_flapping: bool = False
    flap_frames: int = 0


@dataclass
class Pipe:
    """A top/bottom pipe pair with a passable gap centered on gap_y."""
    x: float
    gap_y: float
    width: int = PIPE_WIDTH
    gap_height: int = PIPE_GAP
    scored: bool = False

    @property
    def top_height(self) -> float:
        return self.gap_y - self.gap_height / 2

    @property
    def bottom_y(self) -> float:
        return self.gap_y + self.gap_height / 2


@dataclass
class CollisionResult:
    collision: bool
    type: Optional[str] = None             # pipe-top, pipe-bottom, ceiling, ground
    pipe: Optional[Pipe] = None
    impact_point: Optional[Tuple[float, float]] = None

    @classmethod
    def none(cls) -> "CollisionResult":
        return cls(collision=False)

    @property
    def is_pipe(self) -> bool:
        return self.collision and self.type is not None and self.type.startswith("pipe")


@dataclass
class SessionState:
    """Everything one game session owns. Reset on restart, except the high scores."""
    canvas_height: float = CANVAS_HEIGHT
    state: GameState = GameState.START
    score: int = 0
    high_score: int = 0
    best_score: int = 0
    frame_count: int = 0
    pipes: List[Pipe] = field(default_factory=list)
    player: Player = field(default_factory=Player)
    last_collision: Optional[CollisionResult] = None

    def __post_init__(self):
        self.player.y = self.canvas_height / 2

    def reset(self):
        self.score = 0
        self.frame_count = 0
        self.pipes = []
        self.player = Player(y=self.canvas_height / 2)
        self.last_collision = None


@dataclass
class StateTransition:
    source: GameState
    target: GameState
    action: str
    timestamp: float
    data: dict = field(default_factory=dict)


@dataclass
class HighScoreEntry:
    name: str
    score: int
    id: Optional[int] = None
    game_type: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "HighScoreEntry":
        return cls(
            name=data.get("name", ""),
            score=int(data.get("score", 0)),
            id=data.get("id"),
            game_type=data.get("game_type"),
        )


@dataclass
class SubmitResult:
    success: bool
    id: Optional[int] = None
    is_new_high_score: bool = False
    error: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "SubmitResult":
        return cls(
            success=bool(data.get("success", False)),
            id=data.get("id"),
            is_new_high_score=bool(data.get("isNewHighScore", False)),
            error=data.get("error"),
        )
