import math

import pytest

from rotor_balance import (
    IntersectionSolution,
    TestRun,
    calculate_vectors,
    normalize_angle,
    solve_intersection,
)
from rotor_balance.solver import run_circles


def _runs(amplitudes, phases=(0.0, 120.0, 240.0)):
    return tuple(
        TestRun(amplitude=a, phase_deg=p, color_id=i)
        for i, (a, p) in enumerate(zip(amplitudes, phases), start=1)
    )


@pytest.mark.parametrize(
    "deg, expected",
    [(-10, 350), (370, 10), (360, 0), (0, 0), (-360, 0), (725, 5), (-730, 350), (359.5, 359.5)],
)
def test_normalize_angle_examples(deg, expected):
    assert normalize_angle(deg) == pytest.approx(expected)


@pytest.mark.parametrize("deg", [-1e-17, -1e6 - 0.25, 1e9 + 0.5, -359.999999, 719.0])
def test_normalize_angle_range(deg):
    assert 0.0 <= normalize_angle(deg) < 360.0


def test_run_circles_place_centers_on_base_circle():
    circles = run_circles(7.0, _runs([4.0, 3.5, 5.0]))
    for (cx, cy, _radius), phase in zip(circles, (0, 120, 240)):
        assert math.hypot(cx, cy) == pytest.approx(7.0)
        assert normalize_angle(math.degrees(math.atan2(cy, cx))) == pytest.approx(phase)
    assert [c[2] for c in circles] == [4.0, 3.5, 5.0]


def test_symmetric_runs_put_solution_at_origin():
    solution = solve_intersection(7.0, _runs([5.0, 5.0, 5.0]))

    assert not solution.degenerate
    assert solution.r == pytest.approx(0.0, abs=1e-6)
    # every center is 7 from the origin, every radius 5
    assert solution.rms_error == pytest.approx(2.0, abs=1e-6)


def test_symmetric_runs_matching_base_have_zero_error():
    solution = solve_intersection(7.0, _runs([7.0, 7.0, 7.0]))

    assert solution.r == pytest.approx(0.0, abs=1e-6)
    assert solution.rms_error == pytest.approx(0.0, abs=1e-6)


def test_worked_fixture_values():
    solution = solve_intersection(7.0, _runs([4.0, 3.5, 5.0]))

    expected_x = 0.125
    expected_y = 12.75 / (14 * math.sqrt(3))
    assert solution.x == pytest.approx(expected_x, rel=1e-12)
    assert solution.y == pytest.approx(expected_y, rel=1e-12)
    assert solution.r == pytest.approx(math.hypot(expected_x, expected_y), rel=1e-12)
    assert solution.theta_deg == pytest.approx(math.degrees(math.atan2(expected_y, expected_x)), rel=1e-12)
    assert solution.r == pytest.approx(0.5405, abs=1e-4)
    assert solution.theta_deg == pytest.approx(76.63, abs=1e-2)
    assert solution.rms_error == pytest.approx(2.8547, abs=1e-3)
    assert not solution.degenerate


def test_worked_fixture_is_bit_identical_on_rerun():
    runs = _runs([4.0, 3.5, 5.0])
    first = solve_intersection(7.0, runs)
    second = solve_intersection(7.0, _runs([4.0, 3.5, 5.0]))

    assert first == second
    assert (first.x, first.y, first.r, first.theta_deg, first.rms_error) == (
        second.x,
        second.y,
        second.r,
        second.theta_deg,
        second.rms_error,
    )


def test_rms_error_is_zero_when_circles_share_a_point():
    # circles through (1, 2): radius = distance from each center to that point
    v0 = 5.0
    phases = (10.0, 100.0, 250.0)
    target = (1.0, 2.0)
    amplitudes = []
    for phase in phases:
        cx = v0 * math.cos(math.radians(phase))
        cy = v0 * math.sin(math.radians(phase))
        amplitudes.append(math.hypot(target[0] - cx, target[1] - cy))

    solution = solve_intersection(v0, _runs(amplitudes, phases))

    assert solution.x == pytest.approx(1.0)
    assert solution.y == pytest.approx(2.0)
    assert solution.rms_error == pytest.approx(0.0, abs=1e-9)


def test_identical_phases_return_degenerate_sentinel(caplog):
    with caplog.at_level("WARNING", logger="rotor_balance.solver.geometry"):
        solution = solve_intersection(7.0, _runs([4.0, 3.5, 5.0], phases=(0.0, 0.0, 0.0)))

    assert solution.degenerate
    assert solution == IntersectionSolution.sentinel()
    assert (solution.x, solution.y, solution.r, solution.theta_deg, solution.rms_error) == (0, 0, 0, 0, 0)
    assert "Degenerate" in caplog.text


def test_collinear_centers_are_degenerate():
    # phases 0 and 180 put all three centers on the x axis
    solution = solve_intersection(3.0, _runs([1.0, 2.0, 3.0], phases=(0.0, 180.0, 0.0)))

    assert solution.degenerate


def test_zero_base_amplitude_is_degenerate():
    solution = solve_intersection(0.0, _runs([1.0, 2.0, 3.0]))

    assert solution.degenerate


def test_vector_sum_of_balanced_runs_is_zero():
    result = calculate_vectors(_runs([5.0, 5.0, 5.0]))

    assert result.resultant.r == pytest.approx(0.0, abs=1e-9)
    assert result.opposite.r == result.resultant.r
    assert result.opposite.theta_deg == normalize_angle(result.resultant.theta_deg + 180)


@pytest.mark.parametrize(
    "amplitudes, phases",
    [
        ((4.0, 3.5, 5.0), (0.0, 120.0, 240.0)),
        ((1.0, 0.0, 0.0), (300.0, 0.0, 0.0)),
        ((2.0, 2.0, 1.0), (90.0, 90.0, 270.0)),
    ],
)
def test_opposite_is_resultant_rotated_half_turn(amplitudes, phases):
    result = calculate_vectors(_runs(amplitudes, phases))

    assert result.opposite.r == result.resultant.r
    assert result.opposite.theta_deg == normalize_angle(result.resultant.theta_deg + 180)
    assert 0.0 <= result.resultant.theta_deg < 360.0


def test_vector_sum_values_and_order_independence():
    runs = _runs([2.0, 2.0, 1.0], phases=(90.0, 90.0, 270.0))
    result = calculate_vectors(runs)

    assert result.resultant.r == pytest.approx(3.0)
    assert result.resultant.theta_deg == pytest.approx(90.0)
    assert result.opposite.theta_deg == pytest.approx(270.0)

    shuffled = calculate_vectors(tuple(reversed(runs)))
    assert shuffled.resultant.r == pytest.approx(result.resultant.r)
    assert shuffled.resultant.theta_deg == pytest.approx(result.resultant.theta_deg)


@pytest.mark.parametrize(
    "v0, amplitudes",
    [
        (7.0, (1e200, 3.5, 5.0)),
        (7.0, (1e200, 1e200, 1e200)),
        (1e200, (4.0, 3.5, 5.0)),
        (1e308, (1e308, 1e308, 1e308)),
    ],
)
def test_huge_finite_inputs_return_sentinel(v0, amplitudes, caplog):
    with caplog.at_level("WARNING", logger="rotor_balance.solver.geometry"):
        solution = solve_intersection(v0, _runs(amplitudes))

    assert solution == IntersectionSolution.sentinel()
    assert "Degenerate" in caplog.text


def test_large_but_representable_inputs_still_solve():
    solution = solve_intersection(7e100, _runs([4e100, 3.5e100, 5e100]))

    assert not solution.degenerate
    assert solution.x == pytest.approx(0.125e100)
    assert solution.r == pytest.approx(0.5405e100, rel=1e-3)
