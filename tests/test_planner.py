"""Tests for motion plan building."""

import pytest

from shapebot._types import ShapeKind, ShapeSpec
from shapebot.config import DRIVE_POWER, TURN_POWER, SETTLE_MS
from shapebot.errors import DistanceOutOfRangeError, GeometryError, PlanError
from shapebot.geometry import plan
from shapebot.kinematics import time_for_distance, time_for_turn
from shapebot.planner import CommandKind, MotionCommand, build, plan_duration_ms


@pytest.fixture
def square():
    return ShapeSpec.regular(ShapeKind.SQUARE, 40)


class TestCommandShape:
    @pytest.mark.parametrize("kind", [ShapeKind.SQUARE, ShapeKind.PENTAGON, ShapeKind.HEXAGON])
    def test_four_commands_per_side(self, kind):
        commands = build(ShapeSpec.regular(kind, 30))
        assert len(commands) == 4 * kind.side_count

    def test_sequence_pattern(self, square):
        kinds = [c.kind for c in build(square)]
        assert kinds == [CommandKind.DRIVE, CommandKind.PAUSE, CommandKind.TURN, CommandKind.PAUSE] * 4

    def test_square_values(self, square):
        commands = build(square)
        assert commands[:4] == [
            MotionCommand(CommandKind.DRIVE, 3244, DRIVE_POWER, DRIVE_POWER),
            MotionCommand(CommandKind.PAUSE, SETTLE_MS),
            MotionCommand(CommandKind.TURN, 1173, 0, TURN_POWER),
            MotionCommand(CommandKind.PAUSE, SETTLE_MS),
        ]

    def test_regular_sides_identical(self):
        commands = build(ShapeSpec.regular(ShapeKind.HEXAGON, 25))
        assert len(set(commands[0::4])) == 1
        assert len(set(commands[2::4])) == 1

    def test_custom_settle_and_power(self, square):
        commands = build(square, settle_ms=250, drive_power=30, turn_power=50)
        assert commands[0].left_power == commands[0].right_power == 30
        assert commands[1].duration_ms == 250
        assert commands[2].right_power == 50


class TestTrianglePlan:
    def test_legacy_turns(self):
        spec = ShapeSpec.triangle(50, 40, 30)
        commands = build(spec)
        drives = [c.duration_ms for c in commands if c.kind is CommandKind.DRIVE]
        turns = [c.duration_ms for c in commands if c.kind is CommandKind.TURN]

        assert drives == [time_for_distance(50), time_for_distance(40), time_for_distance(30)]
        assert turns[0] == 1200
        segments = plan(spec)
        assert turns[1:] == [int(time_for_turn(s.turn_deg)) for s in segments[1:]]

    def test_exterior_mode(self):
        commands = build(ShapeSpec.triangle(50, 40, 30), triangle_mode="exterior")
        assert commands[2].duration_ms == int(time_for_turn(90.0))


class TestErrors:
    def test_distance_out_of_range_gives_no_plan(self):
        # Only reachable when triangle bounds are not checked while parsing
        with pytest.raises(DistanceOutOfRangeError):
            build(ShapeSpec.triangle(10, 12, 15))

    def test_degenerate_triangle(self):
        with pytest.raises(GeometryError):
            build(ShapeSpec.triangle(20, 30, 50))

    def test_plan_error_base(self):
        with pytest.raises(PlanError):
            build(ShapeSpec.regular(ShapeKind.SQUARE, 90))


class TestDuration:
    def test_square_total(self, square):
        assert plan_duration_ms(build(square)) == 4 * (3244 + 500 + 1173 + 500)

    def test_empty(self):
        assert plan_duration_ms([]) == 0


class TestCalibrationOverrides:
    def test_custom_turn_reference(self, square):
        commands = build(square, turn_reference_ms=1000, turn_reference_deg=90)
        turns = [c.duration_ms for c in commands if c.kind is CommandKind.TURN]
        assert turns == [1000] * 4

    def test_default_turn_reference_differs(self, square):
        default = build(square)[2].duration_ms
        assert build(square, turn_reference_ms=3000)[2].duration_ms != default

    def test_custom_first_triangle_turn(self):
        commands = build(ShapeSpec.triangle(50, 40, 30), first_turn_deg=115)
        assert commands[2].duration_ms == 1500

    def test_custom_distance_bounds(self):
        commands = build(ShapeSpec.regular(ShapeKind.SQUARE, 90), max_cm=100)
        assert commands[0].duration_ms == time_for_distance(90, max_cm=100)

    def test_narrowed_distance_bounds(self, square):
        with pytest.raises(DistanceOutOfRangeError):
            build(square, max_cm=30)
