#!/usr/bin/env python3
"""
Kinematic Model

Converts distances and turn angles into motor run times. The robot has no
wheel encoders or gyro, so every shape is dead-reckoned from these two
calibrations alone; drift over a long shape is expected and not corrected.
"""

import logging

from .config import (
    DRIVE_SPEED_CM_S, MIN_SIDE_CM, MAX_SIDE_CM,
    TURN_REFERENCE_MS, TURN_REFERENCE_DEG
)
from .errors import DistanceOutOfRangeError, InvalidDurationError

logger = logging.getLogger(__name__)


def time_for_distance(distance_cm: int, speed_cm_s: float = DRIVE_SPEED_CM_S,
                      min_cm: int = MIN_SIDE_CM, max_cm: int = MAX_SIDE_CM) -> int:
    """Milliseconds of straight driving needed to cover distance_cm"""
    if distance_cm < min_cm or distance_cm > max_cm:
        raise DistanceOutOfRangeError(distance_cm, min_cm, max_cm)

    # Truncated, the robot API only takes whole milliseconds
    movement_ms = int(distance_cm / speed_cm_s * 1000)
    if movement_ms <= 0:
        raise InvalidDurationError(distance_cm, movement_ms)

    return movement_ms


def time_for_turn(angle_deg: float, reference_ms: float = TURN_REFERENCE_MS,
                  reference_deg: float = TURN_REFERENCE_DEG) -> float:
    """Milliseconds of in-place turning for angle_deg, scaled from the reference turn.

    Negative angles clamp to a zero-length turn; the robot only spins one way.
    """
    if angle_deg <= 0:
        if angle_deg < 0:
            logger.warning(f"Ignoring negative turn of {angle_deg:.2f} degrees")
        return 0.0
    return angle_deg * reference_ms / reference_deg
