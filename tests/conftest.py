import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_gator.data_models import HighScoreEntry, SubmitResult
from flappy_gator.errors import TransientServiceError
from flappy_gator.game_engine import FlappyGatorGame


class FakeScoreClient:
    """Stands in for ScoreServiceClient. Set fail=True to simulate an outage."""

    def __init__(self, high_scores=None, new_high_score=False, fail=False):
        self.high_scores = list(high_scores or [])
        self.new_high_score = new_high_score
        self.fail = fail
        self.submitted = []
        self.fetches = 0

    def get_high_scores(self, game_type=None):
        self.fetches += 1
        if self.fail:
            raise TransientServiceError("connection refused")
        return [HighScoreEntry(name=n, score=s, game_type=game_type) for n, s in self.high_scores]

    def submit_score(self, game_type, player_name, score):
        if self.fail:
            raise TransientServiceError("timed out")
        self.submitted.append((game_type, player_name, score))
        return SubmitResult(success=True, id=len(self.submitted),
                            is_new_high_score=self.new_high_score)


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play_sound(self, name, volume=None):
        self.played.append((name, volume))


def run_inline(task):
    task()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def score_client():
    return FakeScoreClient(high_scores=[("Ada", 42), ("Bob", 7)])


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def game(rng, score_client, audio):
    return FlappyGatorGame(400, 600, client=score_client, audio=audio,
                           rng=rng, dispatch=run_inline)


@pytest.fixture
def playing_game(game):
    game.start()
    return game
