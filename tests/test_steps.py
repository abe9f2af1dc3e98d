"""Tests for step planning."""

import pytest

from arrowpath.steps import horizontal_to, line_to, offset, pairs, plan, vertical_to
from arrowpath.types import Point


class TestPlan:
    def test_no_steps_is_empty(self) -> None:
        assert plan(Point(x=3, y=4), []) == []

    def test_single_step_to_target(self) -> None:
        assert plan(Point(x=0, y=0), [line_to(Point(x=10, y=5))]) == [10, 5]

    def test_origin_is_trimmed(self) -> None:
        points = plan(Point(x=7, y=9), [offset(1, 1)])
        assert points == [8, 10]

    @pytest.mark.parametrize("count", [1, 2, 5, 12])
    def test_one_pair_per_step(self, count: int) -> None:
        points = plan(Point(x=0, y=0), [offset(1, 2)] * count)
        assert len(points) == 2 * count

    def test_steps_fold_in_order(self) -> None:
        points = plan(Point(x=10, y=10), [offset(5, 0), offset(0, -5), offset(-20, 0)])
        assert points == [15, 10, 15, 5, -5, 5]

    def test_each_step_sees_previous_output(self) -> None:
        seen: list[tuple[float, float]] = []

        def recording(x: float, y: float) -> Point:
            seen.append((x, y))
            return Point(x=x + 1, y=y + 2)

        plan(Point(x=0, y=0), [recording, recording, recording])
        assert seen == [(0, 0), (1, 2), (2, 4)]

    def test_origin_not_mutated(self) -> None:
        origin = Point(x=1, y=2)
        plan(origin, [offset(10, 10)])
        assert origin == Point(x=1, y=2)


class TestStepFactories:
    def test_line_to_ignores_input(self) -> None:
        step = line_to(Point(x=4, y=8))
        assert step(100, -100) == Point(x=4, y=8)

    def test_offset(self) -> None:
        assert offset(3, -2)(10, 10) == Point(x=13, y=8)

    def test_horizontal_to_keeps_y(self) -> None:
        assert horizontal_to(50)(0, 7) == Point(x=50, y=7)

    def test_vertical_to_keeps_x(self) -> None:
        assert vertical_to(50)(7, 0) == Point(x=7, y=50)

    def test_orthogonal_route(self) -> None:
        target = Point(x=60, y=40)
        points = plan(Point(x=0, y=0), [horizontal_to(target.x), vertical_to(target.y)])
        assert points == [60, 0, 60, 40]


class TestPairs:
    def test_pairs(self) -> None:
        assert pairs([0, 1, 2, 3]) == [Point(x=0, y=1), Point(x=2, y=3)]

    def test_empty(self) -> None:
        assert pairs([]) == []

    def test_odd_length_raises(self) -> None:
        with pytest.raises(ValueError, match="even length"):
            pairs([0, 1, 2])
