from fireworks.ambient import AmbientDot, advance_dot, create_dot, create_field
from fireworks.constants import AMBIENT_DOT_COUNT, AMBIENT_FADE_MAX


def test_create_dot_ranges(rng):
    for _ in range(200):
        d = create_dot(800, 600, rng)
        assert 0 <= d.x < 800 and 0 <= d.y < 600
        assert 0.5 <= d.size < 2.0
        assert -0.2 <= d.speed_x < 0.2 and -0.2 <= d.speed_y < 0.2
        assert 0 <= d.opacity < 1
        assert 0.005 <= abs(d.fade) < 0.02


def test_create_field_default_count(rng):
    assert len(create_field(800, 600, rng=rng)) == AMBIENT_DOT_COUNT == 150


def test_opacity_stays_near_unit_range(rng):
    dots = create_field(800, 600, 50, rng)
    for _ in range(2000):
        for d in dots:
            advance_dot(d, 800, 600)
            assert -AMBIENT_FADE_MAX <= d.opacity <= 1 + AMBIENT_FADE_MAX


def test_opacity_bounces_instead_of_clamping():
    d = AmbientDot(x=10, y=10, size=1, speed_x=0, speed_y=0, opacity=0.995, fade=0.01)
    advance_dot(d, 100, 100)
    assert d.opacity > 1  # overshoot allowed
    assert d.fade == -0.01
    advance_dot(d, 100, 100)
    assert d.opacity < 1


def test_positions_wrap_every_tick(rng):
    dots = create_field(300, 200, 80, rng)
    for d in dots:
        d.speed_x *= 50  # move fast enough to hit edges often
        d.speed_y *= 50
    for _ in range(500):
        for d in dots:
            advance_dot(d, 300, 200)
            assert 0 <= d.x <= 300
            assert 0 <= d.y <= 200


def test_wrap_goes_to_opposite_edge():
    d = AmbientDot(x=0.1, y=99.9, size=1, speed_x=-0.2, speed_y=0.2, opacity=0.5, fade=0.01)
    advance_dot(d, 100, 100)
    assert d.x == 100
    assert d.y == 0


def test_zero_or_negative_viewport_collapses_to_point(rng):
    d = create_dot(0, -50, rng)
    assert d.x == 0 and d.y == 0
    for _ in range(10):
        advance_dot(d, 0, -50)
        assert d.x == 0 and d.y == 0
