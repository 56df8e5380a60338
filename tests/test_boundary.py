import numpy as np
import pytest

from canvas_playground.boundary import extract_boundary, line_from_angle, line_from_normal, sample_xs


def test_sample_xs_covers_range_inclusively():
    xs = sample_xs((-5, 5), 0.01)
    assert len(xs) == 1001
    assert xs[0] == -5 and xs[-1] == pytest.approx(5)


def test_invalid_sampling_range():
    with pytest.raises(ValueError):
        sample_xs((1, -1), 0.1)


def test_straight_line_boundary():
    curves = extract_boundary([0.0, 1.0, -1.0])

    assert len(curves) == 1
    curve = curves[0]
    assert curve.shape == (1001, 2)
    np.testing.assert_allclose(curve[:, 1], curve[:, 0])


def test_linear_boundary_with_cubic_term():
    # y = x^3 - 1
    curves = extract_boundary([-1.0, 0.0, -1.0, 1.0], terms=["x*x*x"])

    assert len(curves) == 1
    x, y = curves[0][:, 0], curves[0][:, 1]
    np.testing.assert_allclose(y, x ** 3 - 1, atol=1e-9)


def test_circle_gives_one_closed_loop():
    # x^2 + y^2 - 1 = 0, layout [bias, x, y, x*x, y*y]
    curves = extract_boundary([-1.0, 0.0, 0.0, 1.0, 1.0], terms=["x*x", "y*y"])

    assert len(curves) == 1
    loop = curves[0]
    x, y = loop[:, 0], loop[:, 1]
    np.testing.assert_allclose(x ** 2 + y ** 2, 1.0, atol=1e-9)
    assert np.all(np.abs(x) <= 1 + 1e-9)
    np.testing.assert_array_equal(loop[0], loop[-1])

    # every interior x has both roots
    for sample in (-0.5, 0.0, 0.75):
        ys = y[np.isclose(x, sample)]
        assert ys.min() == pytest.approx(-np.sqrt(1 - sample ** 2))
        assert ys.max() == pytest.approx(np.sqrt(1 - sample ** 2))


def test_circle_is_stitched_without_jumps():
    loop = extract_boundary([-1.0, 0.0, 0.0, 1.0, 1.0], terms=["x*x", "y*y"])[0]
    steps = np.linalg.norm(np.diff(loop, axis=0), axis=1)
    # the largest step is where a branch meets the vertical tangent
    assert steps.max() < 0.3


def test_hyperbola_opening_sideways_gives_two_arms():
    # x^2 - y^2 - 1 = 0
    curves = extract_boundary([-1.0, 0.0, 0.0, 1.0, -1.0], terms=["x*x", "y*y"])

    assert len(curves) == 2
    left, right = sorted(curves, key=lambda c: c[:, 0].mean())
    assert np.all(left[:, 0] <= -1 + 1e-9)
    assert np.all(right[:, 0] >= 1 - 1e-9)
    for arm in curves:
        np.testing.assert_allclose(arm[:, 0] ** 2 - arm[:, 1] ** 2, 1.0, atol=1e-9)


def test_hyperbola_opening_vertically_keeps_roots_apart():
    # y^2 - x^2 - 1 = 0 is solvable for every x, the two roots never meet
    curves = extract_boundary([-1.0, 0.0, 0.0, -1.0, 1.0], terms=["x*x", "y*y"])

    assert len(curves) == 2
    signs = sorted(np.sign(curve[:, 1]).mean() for curve in curves)
    assert signs == [-1.0, 1.0]


def test_breakpoint_splits_linear_branches():
    # x*y = 1 has no solution at x = 0
    curves = extract_boundary([-1.0, 0.0, 0.0, 1.0], terms=["x*y"], step=0.5)

    assert len(curves) == 2
    for curve in curves:
        np.testing.assert_allclose(curve[:, 0] * curve[:, 1], 1.0)
    assert np.all(curves[0][:, 0] < 0) and np.all(curves[1][:, 0] > 0)


def test_sign_change_between_samples_splits_linear_branches():
    # 0.005 + x changes sign between two samples without any sample hitting zero
    curves = extract_boundary([-1.0, 0.0, 0.005, 1.0], terms=["x*y"])

    assert len(curves) == 2
    left, right = curves
    assert np.all(left[:, 0] < -0.005) and np.all(left[:, 1] < 0)
    assert np.all(right[:, 0] > -0.005) and np.all(right[:, 1] > 0)


def test_vertical_line_when_y_drops_out():
    curves = extract_boundary([-0.5, 1.0, 0.0])

    assert len(curves) == 1
    np.testing.assert_allclose(curves[0], [[0.5, -5.0], [0.5, 5.0]])


def test_zero_coefficients_have_no_boundary():
    assert extract_boundary([0.0, 0.0, 0.0, 0.0], terms=["y*y"]) == []


def test_coefficient_count_must_match_terms():
    with pytest.raises(ValueError):
        extract_boundary([0.0, 1.0, -1.0], terms=["x*x"])


def test_line_from_angle():
    line = line_from_angle(0, 100, center=(400, 300), length=200)
    np.testing.assert_allclose(line.foot, [500, 300], atol=1e-9)
    np.testing.assert_allclose(line.start, [500, 400], atol=1e-9)
    np.testing.assert_allclose(line.end, [500, 200], atol=1e-9)

    # 90 degrees points up the screen
    up = line_from_angle(90, 50, center=(0, 0), length=10)
    np.testing.assert_allclose(up.foot, [0, -50], atol=1e-9)


def test_line_from_normal():
    # -1 + x = 0 is the vertical line x = 1
    line = line_from_normal([-1.0, 1.0, 0.0], half_length=20)

    np.testing.assert_allclose(line.foot, [1.0, 0.0])
    assert line.start[0] == pytest.approx(1.0)
    assert line.end[0] == pytest.approx(1.0)
    assert np.linalg.norm(line.start - line.foot) == pytest.approx(20)
    assert np.linalg.norm(line.end - line.foot) == pytest.approx(20)


def test_line_from_normal_foot_is_closest_point_to_origin():
    line = line_from_normal([2.0, 3.0, 4.0], half_length=5)

    # the foot lies on the line and along the normal
    assert 2.0 + 3.0 * line.foot[0] + 4.0 * line.foot[1] == pytest.approx(0.0)
    assert line.foot[0] * 4.0 == pytest.approx(line.foot[1] * 3.0)
    assert 2.0 + 3.0 * line.start[0] + 4.0 * line.start[1] == pytest.approx(0.0)


def test_line_from_normal_without_normal():
    assert line_from_normal([1.0, 0.0, 0.0]) is None
    with pytest.raises(ValueError):
        line_from_normal([1.0, 0.0, 0.0, 1.0])
