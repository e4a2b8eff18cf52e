"""
state_machine.py: Game states and the actions that move between them.
"""

import logging
import time
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .constants import STATE_HISTORY_LENGTH
from .data_models import GameState, StateTransition
from .errors import InvalidTransition

logger = logging.getLogger(__name__)

# (current state, action) -> next state. Anything missing is invalid.
TRANSITIONS: Dict[Tuple[GameState, str], GameState] = {
    (GameState.START, "start"): GameState.PLAYING,
    (GameState.PLAYING, "pause"): GameState.PAUSED,
    (GameState.PAUSED, "resume"): GameState.PLAYING,
    (GameState.PLAYING, "collide"): GameState.GAME_OVER,
    (GameState.GAME_OVER, "restart"): GameState.PLAYING,
}


class GameStateMachine:
    def __init__(self, initial: GameState = GameState.START,
                 history_length: int = STATE_HISTORY_LENGTH):
        self.current = initial
        self.previous: Optional[GameState] = None
        self._history: Deque[StateTransition] = deque(maxlen=history_length)

    def can_fire(self, action: str) -> bool:
        return (self.current, action) in TRANSITIONS

    def fire(self, action: str, **data) -> StateTransition:
        """Applies action or raises InvalidTransition, leaving the state as is."""
        target = TRANSITIONS.get((self.current, action))
        if target is None:
            raise InvalidTransition(self.current, action)

        record = StateTransition(source=self.current, target=target, action=action,
                                 timestamp=time.time(), data=data)
        self._history.append(record)
        self.previous, self.current = self.current, target
        logger.info("%s: %s -> %s", action, record.source.value, target.value)
        return record

    def is_state(self, state: GameState) -> bool:
        return self.current is state

    def history(self) -> List[StateTransition]:
        """The most recent transitions, oldest first."""
        return list(self._history)
