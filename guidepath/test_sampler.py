# Arc-length sampling checks: lengths, endpoints, saturation, coincident points.
import math

from .curve import curve_path
from .sampler import curve_length, point_at_distance, point_on_curve

ZERO = (0.0, 0.0, 0.0)


def _close(a, b, tol=1e-9):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def test_length_is_sum_of_distances():
    curve = [(0.0, 0.0, 0.0), (3.0, 4.0, 0.0), (3.0, 4.0, 2.0), (0.0, 0.0, 2.0)]
    assert curve_length(curve) == 5.0 + 2.0 + 5.0
    curve = [(0.1, 0.2, 0.3), (1.1, -0.5, 2.0), (-2.0, 0.0, 0.7)]
    expected = math.dist(curve[0], curve[1]) + math.dist(curve[1], curve[2])
    assert abs(curve_length(curve) - expected) < 1e-12


def test_length_of_short_curves():
    assert curve_length(None) == 0.0
    assert curve_length([]) == 0.0
    assert curve_length([(1.0, 2.0, 3.0)]) == 0.0


def test_four_collinear_guides_length():
    curve = curve_path([(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)], 15)
    assert abs(curve_length(curve) - 3.0) < 1e-5


def test_endpoints():
    curve = curve_path([(0, 0, 0), (1, 2, 0), (3, -1, 1), (4, 0, 2), (6, 1, 0)], 12)
    pos0, _ = point_on_curve(curve, 0.0)
    assert pos0 == curve[0]
    pos1, _ = point_on_curve(curve, 1.0)
    assert _close(pos1, curve[-1], 1e-9)


def test_midway_on_straight_line():
    curve = [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0)]
    pos, facing = point_on_curve(curve, 0.5)
    assert _close(pos, (5.0, 0.0, 0.0))
    assert _close(facing, (5.1, 0.0, 0.0))
    _, facing = point_on_curve(curve, 0.5, facing_epsilon=0.1)
    assert _close(facing, (6.0, 0.0, 0.0))


def test_facing_clamped_to_segment_end():
    curve = [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0)]
    pos, facing = point_on_curve(curve, 1.0)
    assert pos == (10.0, 0.0, 0.0)
    assert facing == (10.0, 0.0, 0.0)


def test_degenerate_curve_returns_zero():
    assert point_on_curve(None, 0.5) == (ZERO, ZERO)
    assert point_on_curve([], 0.5) == (ZERO, ZERO)
    assert point_on_curve([(4.0, 5.0, 6.0)], 0.5) == (ZERO, ZERO)


def test_beyond_end_saturates():
    curve = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]
    pos, facing = point_on_curve(curve, 2.5)
    assert pos == (1.0, 1.0, 0.0)
    assert facing == (1.0, 1.0, 0.0)


def test_negative_t_pins_to_start():
    curve = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]
    pos, facing = point_on_curve(curve, -0.5)
    assert pos == (0.0, 0.0, 0.0)
    assert _close(facing, (0.01, 0.0, 0.0))


def test_coincident_points_are_skipped():
    curve = [(0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0)]
    pos, _ = point_on_curve(curve, 0.0)
    assert pos == (0.0, 0.0, 0.0)
    pos, _ = point_on_curve(curve, 0.75)
    assert _close(pos, (1.5, 0.0, 0.0))
    same = [(2.0, 2.0, 2.0)] * 4
    pos, facing = point_on_curve(same, 0.5)
    assert pos == (2.0, 2.0, 2.0)
    assert facing == (2.0, 2.0, 2.0)


def test_point_at_distance():
    curve = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 3.0, 0.0)]
    pos, _ = point_at_distance(curve, 2.5)
    assert _close(pos, (1.0, 1.5, 0.0))
    pos, _ = point_at_distance(curve, 100.0)
    assert pos == (1.0, 3.0, 0.0)


def test_constant_speed_along_curve():
    curve = curve_path([(0, 0, 0), (2, 3, 0), (4, -1, 0), (6, 2, 0)], 40)
    total = curve_length(curve)
    prev, _ = point_on_curve(curve, 0.0)
    steps = 20
    walked = 0.0
    for i in range(1, steps + 1):
        pos, _ = point_on_curve(curve, i / steps)
        walked += math.dist(prev, pos)
        prev = pos
    # chords can only undershoot the polyline
    assert walked <= total + 1e-9
    assert walked > total * 0.95


def run():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()


if __name__ == "__main__":
    run()
