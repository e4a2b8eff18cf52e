import math

import pytest

from flappy_gator.collision import CollisionDetector, circle_intersects_rect
from flappy_gator.data_models import Pipe, Player
from flappy_gator.errors import InvariantViolation


@pytest.fixture
def detector():
    return CollisionDetector(canvas_height=600, player_height=40, hitbox_radius=15)


@pytest.fixture
def pipe():
    # Top section 0..225, bottom section 375..600
    return Pipe(x=100.0, gap_y=300.0)


def test_center_of_gap_is_safe(detector, pipe):
    assert not detector.check_pipe_collision(130, 300, [pipe]).collision


def test_hitbox_touching_top_section(detector, pipe):
    result = detector.check_pipe_collision(130, 235, [pipe])
    assert result.collision
    assert result.type == "pipe-top"
    assert result.pipe is pipe
    assert result.impact_point == (130, 225)


def test_hitbox_touching_bottom_section(detector, pipe):
    result = detector.check_pipe_collision(130, 365, [pipe])
    assert result.collision
    assert result.type == "pipe-bottom"


def test_distance_equal_to_radius_is_not_a_hit(detector, pipe):
    assert not detector.check_pipe_collision(130, 240, [pipe]).collision
    assert not detector.check_pipe_collision(85, 100, [pipe]).collision


def test_front_edge_of_pipe(detector, pipe):
    assert detector.check_pipe_collision(90, 215, [pipe]).collision


def test_rounded_corner_is_forgiving(detector, pipe):
    # Bounding boxes overlap but the circle clears the corner
    assert not detector.check_pipe_collision(88, 237, [pipe]).collision
    assert detector.check_pipe_collision(90, 235, [pipe]).collision


def test_pipes_far_away_are_ignored(detector):
    far = Pipe(x=300.0, gap_y=100.0)
    assert not detector.check_pipe_collision(100, 500, [far]).collision


def test_checks_every_pipe(detector):
    pipes = [Pipe(x=300.0, gap_y=300.0), Pipe(x=80.0, gap_y=300.0)]
    result = detector.check_pipe_collision(100, 390, pipes)
    assert result.type == "pipe-bottom"
    assert result.pipe is pipes[1]


def test_ceiling_boundary_is_strict(detector):
    assert not detector.check_boundary_collision(0).collision
    result = detector.check_boundary_collision(-0.1)
    assert result.collision and result.type == "ceiling"


def test_ground_boundary_accounts_for_player_height(detector):
    assert not detector.check_boundary_collision(560).collision
    result = detector.check_boundary_collision(560.1)
    assert result.collision and result.type == "ground"


def test_pipe_hit_is_reported_before_boundary_hit(detector):
    pipe = Pipe(x=90.0, gap_y=300.0)
    player = Player(x=100, y=-5.0)
    result = detector.evaluate(player, [pipe])
    assert result.type == "pipe-top"
    assert detector.last_collision_type == "pipe-top"


def test_boundary_hit_without_pipes(detector):
    result = detector.evaluate(Player(y=590.0), [])
    assert result.type == "ground"


def test_no_collision_in_open_air(detector):
    result = detector.evaluate(Player(y=300.0), [Pipe(x=350.0, gap_y=200.0)])
    assert not result.collision
    assert result.type is None


@pytest.mark.parametrize("field, value", [
    ("gap_y", None),
    ("gap_height", None),
    ("x", math.nan),
    ("width", "60"),
])
def test_malformed_pipe_fails_loudly(detector, field, value):
    pipe = Pipe(x=100.0, gap_y=300.0)
    setattr(pipe, field, value)
    with pytest.raises(InvariantViolation):
        detector.check_pipe_collision(130, 300, [pipe])


def test_invariant_violation_is_an_assertion_error(detector):
    with pytest.raises(AssertionError):
        detector.check_boundary_collision(math.inf)


def test_reset_forgets_last_collision(detector):
    detector.check_boundary_collision(-1)
    detector.reset()
    assert detector.last_collision_type is None


@pytest.mark.parametrize("cx, cy, expected", [
    (5, 5, True),        # inside
    (-14, 5, True),      # left of rect, within radius
    (-15, 5, False),     # exactly radius away
    (-11, -11, False),   # corner diagonal ~15.6
    (-10, -10, True),    # corner diagonal ~14.1
])
def test_circle_rect_closest_point(cx, cy, expected):
    assert circle_intersects_rect(cx, cy, 15, 0, 0, 10, 10) is expected
