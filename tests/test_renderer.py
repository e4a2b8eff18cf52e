import pygame
import pytest

from flappy_gator.constants import BACKGROUND_COLOR, PIPE_COLOR
from flappy_gator.data_models import GameState, Pipe, SessionState
from flappy_gator.renderer import FlappyRenderer


@pytest.fixture
def surface():
    return pygame.Surface((400, 600))


@pytest.fixture
def session():
    session = SessionState(canvas_height=600, state=GameState.PLAYING)
    session.pipes = [Pipe(x=200.0, gap_y=300.0)]
    return session


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_playing_frame_draws_pipes_over_sky(surface, session):
    FlappyRenderer(surface).render(session)
    assert rgb(surface, (230, 100)) == PIPE_COLOR
    assert rgb(surface, (230, 500)) == PIPE_COLOR
    assert rgb(surface, (230, 300)) == BACKGROUND_COLOR
    assert rgb(surface, (20, 300)) == BACKGROUND_COLOR


def test_start_screen_hides_pipes(surface, session):
    session.state = GameState.START
    FlappyRenderer(surface).render(session)
    assert rgb(surface, (230, 100)) != PIPE_COLOR


@pytest.mark.parametrize("state", list(GameState))
def test_every_state_renders(surface, session, state):
    session.state = state
    session.player.rotation = 45.0
    session.player.is_flapping = state is GameState.PLAYING
    FlappyRenderer(surface).render(session)
