import math
import pytest
import numpy as np

from geometry import COLORS, Point, find_pivot, polar_angle, renumber_points, sort_points


def make_points(xs, ys) -> list[Point]:
    return [Point(i + 1, float(x), float(y), COLORS[i % len(COLORS)]) for i, (x, y) in enumerate(zip(xs, ys))]


def check_sweep_order(points: list[Point], ordered: list[Point]):
    assert sorted(ordered, key=id) == sorted(points, key=id), "ordering is not a permutation of the input"

    pivot = ordered[0]
    assert all((pivot.y, pivot.x) <= (p.y, p.x) for p in points), (
        f"Pivot {pivot} is not the topmost-then-leftmost point"
    )

    angles = [polar_angle(pivot, p) for p in ordered[1:]]
    for i in range(len(angles) - 1):
        assert angles[i] >= angles[i + 1], (
            f"Angles not descending at {i}: {angles[i]} < {angles[i + 1]}\n{ordered}"
        )


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * high + low,
        "normal": lambda low, high, s: np.random.randn(s) * high + low,
        "uniform_int": np.random.randint,
    }


def test_empty_and_single():
    assert sort_points([]) == []

    p = Point(1, 3.0, 4.0, "blue")
    assert sort_points([p]) == [p]


def test_returns_new_list():
    points = make_points([3, 1, 2], [3, 1, 2])
    snapshot = list(points)

    ordered = sort_points(points)

    assert points == snapshot
    assert ordered is not points

    single = [Point(1, 0.0, 0.0)]
    assert sort_points(single) is not single


def test_scenario_negative_y_pivot():
    a, b, c = Point(1, 10, 10), Point(2, 0, 0), Point(3, 5, -5)

    assert sort_points([a, b, c]) == [c, b, a]


def test_scenario_right_angle():
    origin, right, down = Point(1, 0, 0), Point(2, 10, 0), Point(3, 0, 10)

    assert polar_angle(origin, right) == 0
    assert polar_angle(origin, down) == pytest.approx(math.pi / 2)
    assert sort_points([right, down, origin]) == [origin, down, right]


def test_pivot_tie_on_y_takes_smallest_x():
    points = make_points([5, 2, 8], [1, 1, 1])

    assert sort_points(points)[0] is points[1]


def test_pivot_duplicates_take_first_in_input_order():
    first = Point(1, 2.0, 2.0, "red")
    second = Point(2, 2.0, 2.0, "green")
    other = Point(3, 5.0, 7.0, "blue")

    assert find_pivot([other, first, second]) == 1
    ordered = sort_points([other, first, second])
    assert ordered[0] is first
    assert second in ordered


def test_ordering_ignores_id_and_color():
    points = [Point(3, 0, 0, "red"), Point(1, 4, 4, "blue"), Point(2, -4, 4, "green")]
    relabeled = [Point(9 - p.id, p.x, p.y, "purple") for p in points]

    coords = [(p.x, p.y) for p in sort_points(points)]
    assert coords == [(p.x, p.y) for p in sort_points(relabeled)]


@pytest.mark.parametrize("n_points", [2, 3, 5, 10])
def test_identical_points(n_points):
    points = make_points([7] * n_points, [7] * n_points)

    ordered = sort_points(points)

    assert ordered[0] is points[0]
    assert sorted(ordered, key=id) == sorted(points, key=id)


def test_collinear_ties_keep_input_order():
    pivot = Point(1, 0, 0)
    far, near = Point(2, 10, 10), Point(3, 5, 5)
    side = Point(4, -3, 6)

    assert sort_points([far, pivot, near, side]) == [pivot, side, far, near]


def test_collinear_ties_broken_by_distance():
    pivot = Point(1, 0, 0)
    far, near = Point(2, 10, 10), Point(3, 5, 5)
    side = Point(4, -3, 6)

    assert sort_points([far, pivot, near, side], break_ties=True) == [pivot, side, near, far]


def test_horizontal_line():
    points = make_points([4, 0, 2, 1], [3, 3, 3, 3])

    ordered = sort_points(points)

    assert ordered[0] is points[1]
    check_sweep_order(points, ordered)


def test_sorting_is_idempotent():
    np.random.seed(7)
    points = make_points(np.random.rand(25) * 100, np.random.rand(25) * 100)

    once = sort_points(points)
    twice = sort_points(once)

    assert twice[0] is once[0]
    assert twice == once


@pytest.mark.parametrize("n_points", [2, 3, 10, 100])
@pytest.mark.parametrize("distribution_type", ["uniform_int", "uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 100), (-100, 100), (0, 1280)])
def test_sweep_order_properties(n_points, distribution_type, limits, distribution_gen_func):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=50)
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).astype(float)
        ys = gen_func(low, high, n_points).astype(float)
        points = make_points(xs, ys)

        check_sweep_order(points, sort_points(points))
        check_sweep_order(points, sort_points(points, break_ties=True))


def test_renumber_points_keeps_order():
    points = [Point(3, 1, 1, "red"), Point(7, 2, 2, "blue"), Point(5, 3, 3, "green")]

    renumbered = renumber_points(points)

    assert [p.id for p in renumbered] == [1, 2, 3]
    assert [(p.x, p.y, p.color) for p in renumbered] == [(p.x, p.y, p.color) for p in points]
    assert [p.id for p in points] == [3, 7, 5]


def test_point_text():
    p = Point(2, 10.0, 3.14159, "yellow")

    assert p.row() == (2, "10.00", "3.14")
    assert p.label() == "ID: 2  Position: (10.00, 3.14)"
