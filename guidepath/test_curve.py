# Curve construction checks: sample counts, endpoints, locality.
from .curve import curve_path, quadratic_bezier_points, segment_slice
from .sampler import curve_length


def _close(a, b, tol=1e-9):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def _line(n):
    return [(float(i), 0.0, 0.0) for i in range(n)]


def test_output_length():
    for n in range(3, 9):
        for r in (2, 5, 15, 50):
            curve = curve_path(_line(n), r)
            assert len(curve) == (n - 2) * r, f"n={n} r={r} got {len(curve)}"


def test_too_few_guides_is_absent():
    assert curve_path([], 10) is None
    assert curve_path([(0, 0, 0)], 10) is None
    assert curve_path([(0, 0, 0), (1, 0, 0)], 10) is None


def test_three_guides_resolution_two():
    curve = curve_path([(0, 0, 0), (1, 0, 0), (1, -1, 0)], 2)
    assert curve == [(0.0, 0.0, 0.0), (1.0, -1.0, 0.0)]


def test_collinear_guides():
    curve = curve_path(_line(4), 5)
    assert len(curve) == 10
    assert abs(curve_length(curve) - 3.0) < 1e-9
    assert all(abs(p[1]) < 1e-12 and abs(p[2]) < 1e-12 for p in curve)
    # segments meet at the midpoint between guides 1 and 2
    assert curve[4] == (1.5, 0.0, 0.0)
    assert curve[5] == (1.5, 0.0, 0.0)


def test_accepts_2d_guides():
    curve = curve_path([(0, 0), (1, 0), (1, -1)], 2)
    assert curve == [(0.0, 0.0, 0.0), (1.0, -1.0, 0.0)]


def test_interior_samples_use_i_over_count():
    pts = quadratic_bezier_points((0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (2.0, 0.0, 0.0), 4)
    assert pts[0] == (0.0, 0.0, 0.0)
    assert pts[-1] == (2.0, 0.0, 0.0)
    # t = 0.25 and t = 0.5
    assert _close(pts[1], (0.5, 0.375, 0.0))
    assert _close(pts[2], (1.0, 0.5, 0.0))


def test_through_influence_hits_control_point():
    pts = quadratic_bezier_points((0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (2.0, 0.0, 0.0), 4,
                                  through_influence=True)
    assert _close(pts[2], (1.0, 1.0, 0.0))


def test_low_resolution_does_not_raise():
    guides = [(0, 0, 0), (1, 2, 0), (3, 1, 0), (4, 4, 0)]
    assert curve_path(guides, 0) == []
    assert curve_path(guides, -3) == []
    one = curve_path(guides, 1)
    # one point per segment: each segment's destination
    assert one == [(2.0, 1.5, 0.0), (4.0, 4.0, 0.0)]


def test_deterministic():
    guides = [(0.1, 0.2, 0.3), (1.7, -0.4, 2.0), (2.2, 3.3, -1.0), (5.0, 0.5, 0.25), (6.0, 6.0, 6.0)]
    assert curve_path(guides, 13) == curve_path(list(guides), 13)


def test_moving_interior_guide_is_local():
    guides = [(0, 0, 0), (1, 1, 0), (2, 0, 0), (3, 1, 0), (4, 0, 0), (5, 1, 0), (6, 0, 0)]
    r = 6
    before = curve_path(guides, r)
    moved = list(guides)
    moved[3] = (3.0, 4.0, 2.0)
    after = curve_path(moved, r)
    # guide 3 shapes segments 1..3 (0-based); 0 and 4 stay put
    for seg in (0, 4):
        s = segment_slice(seg, r)
        assert before[s] == after[s], f"segment {seg} changed"
    assert before[segment_slice(2, r)] != after[segment_slice(2, r)]


def run():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()


if __name__ == "__main__":
    run()
