#!/usr/bin/env python3
"""
Plan Builder

Combines shape geometry with the kinematic model into the exact list of
timed motor commands for one shape: drive, settle, turn, settle, once per
side. Building a plan never touches the robot.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from ._types import ShapeSpec
from .config import (
    DRIVE_POWER, TURN_POWER, SETTLE_MS, TRIANGLE_TURN_MODE, DRIVE_SPEED_CM_S,
    TURN_REFERENCE_MS, TURN_REFERENCE_DEG, TRIANGLE_FIRST_TURN_DEG, MIN_SIDE_CM, MAX_SIDE_CM
)
from .geometry import plan
from .kinematics import time_for_distance, time_for_turn

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    DRIVE = "drive"
    TURN = "turn"
    PAUSE = "pause"


@dataclass(frozen=True)
class MotionCommand:
    """One atomic robot instruction"""
    kind: CommandKind
    duration_ms: int
    left_power: int = 0
    right_power: int = 0

    @classmethod
    def drive(cls, duration_ms: int, power: int = DRIVE_POWER) -> "MotionCommand":
        return cls(CommandKind.DRIVE, duration_ms, power, power)

    @classmethod
    def turn(cls, duration_ms: int, power: int = TURN_POWER) -> "MotionCommand":
        # Only the right wheel runs, so the robot pivots left on the spot
        return cls(CommandKind.TURN, duration_ms, 0, power)

    @classmethod
    def pause(cls, duration_ms: int = SETTLE_MS) -> "MotionCommand":
        return cls(CommandKind.PAUSE, duration_ms)


def build(spec: ShapeSpec, triangle_mode: str = TRIANGLE_TURN_MODE, settle_ms: int = SETTLE_MS,
          speed_cm_s: float = DRIVE_SPEED_CM_S, drive_power: int = DRIVE_POWER,
          turn_power: int = TURN_POWER, turn_reference_ms: float = TURN_REFERENCE_MS,
          turn_reference_deg: float = TURN_REFERENCE_DEG,
          first_turn_deg: float = TRIANGLE_FIRST_TURN_DEG,
          min_cm: int = MIN_SIDE_CM, max_cm: int = MAX_SIDE_CM) -> List[MotionCommand]:
    """Motion commands for one shape.

    Raises GeometryError or DistanceError before any command is produced,
    so callers never receive half a shape.
    """
    segments = plan(spec, triangle_mode, first_turn_deg)

    timings = []
    for segment in segments:
        drive_ms = time_for_distance(segment.distance_cm, speed_cm_s, min_cm, max_cm)
        turn_ms = int(time_for_turn(segment.turn_deg, turn_reference_ms, turn_reference_deg))
        timings.append((drive_ms, turn_ms))

    commands = []
    for drive_ms, turn_ms in timings:
        commands.extend([
            MotionCommand.drive(drive_ms, drive_power),
            MotionCommand.pause(settle_ms),
            MotionCommand.turn(turn_ms, turn_power),
            MotionCommand.pause(settle_ms),
        ])

    logger.info(f"Planned {spec.describe()}: {len(commands)} commands, "
                f"~{plan_duration_ms(commands) / 1000.0:.2f}s")
    return commands


def plan_duration_ms(commands: List[MotionCommand]) -> int:
    """Nominal run time of a plan, ignoring communication overhead"""
    return sum(command.duration_ms for command in commands)
