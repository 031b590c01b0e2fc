#!/usr/bin/env python3
"""
Shape Geometry

Turns a validated ShapeSpec into the ordered list of sides the robot drives,
each paired with the in-place turn taken after it.

Regular polygons are n identical sides turning 360/n degrees. Triangles are
driven longest side first. The turn after that first side is a fixed
calibrated value in "legacy" mode (how the robot has always drawn
triangles) and the true exterior angle in "exterior" mode.
"""

import logging
from typing import List, Tuple

from ._types import ShapeKind, ShapeSpec, SideSegment
from .config import TRIANGLE_TURN_MODE, TRIANGLE_FIRST_TURN_DEG
from .errors import DegenerateTriangleError, NonPositiveSideError
from .utils import law_of_cosines_angle, heron_area, regular_polygon_area

logger = logging.getLogger(__name__)

TRIANGLE_MODES = ("legacy", "exterior")


def is_valid_triangle(a, b, c) -> bool:
    """Strict triangle inequality; collinear sides are rejected"""
    return (a + b > c) and (a + c > b) and (b + c > a)


def order_triangle_sides(a, b, c) -> Tuple[int, int, int]:
    """Longest side first, the other two keep their input order"""
    longest = max(a, b, c)
    if longest == a:
        return a, b, c
    if longest == b:
        return b, a, c
    return c, a, b


def _check_triangle(sides):
    if any(s <= 0 for s in sides):
        raise NonPositiveSideError(sides)
    if not is_valid_triangle(*sides):
        raise DegenerateTriangleError(sides)


def triangle_angles(a, b, c) -> Tuple[float, float, float]:
    """Interior angles (degrees) at the corners facing the ordered sides.

    The sides are reordered with order_triangle_sides first, so the first
    angle always faces the longest side.
    """
    _check_triangle((a, b, c))
    first, second, third = order_triangle_sides(a, b, c)
    try:
        angle_a = law_of_cosines_angle(first, second, third)
        angle_b = law_of_cosines_angle(second, first, third)
    except ValueError:
        raise DegenerateTriangleError((a, b, c)) from None
    angle_c = 180 - angle_a - angle_b
    return angle_a, angle_b, angle_c


def exterior_angles(a, b, c) -> Tuple[float, float, float]:
    """180 minus each interior angle from triangle_angles"""
    return tuple(180 - angle for angle in triangle_angles(a, b, c))


def _regular_plan(spec: ShapeSpec) -> List[SideSegment]:
    side = spec.sides[0]
    if side <= 0:
        raise NonPositiveSideError(spec.sides)
    n = spec.kind.side_count
    turn = 360.0 / n
    return [SideSegment(side, turn) for _ in range(n)]


def _triangle_plan(spec: ShapeSpec, mode: str, first_turn_deg: float) -> List[SideSegment]:
    first, second, third = order_triangle_sides(*spec.sides)
    ext_a, ext_b, ext_c = exterior_angles(*spec.sides)

    first_turn = first_turn_deg if mode == "legacy" else ext_a
    return [
        SideSegment(first, first_turn),
        SideSegment(second, ext_b),
        SideSegment(third, ext_c),
    ]


def plan(spec: ShapeSpec, triangle_mode: str = TRIANGLE_TURN_MODE,
         first_turn_deg: float = TRIANGLE_FIRST_TURN_DEG) -> List[SideSegment]:
    """Ordered (distance, turn) segments for one shape.

    first_turn_deg is the turn after the longest triangle side in legacy mode.
    """
    if triangle_mode not in TRIANGLE_MODES:
        raise ValueError("Unknown triangle mode '{}' (expected one of {})".format(triangle_mode, TRIANGLE_MODES))

    if spec.kind is ShapeKind.TRIANGLE:
        segments = _triangle_plan(spec, triangle_mode, first_turn_deg)
    else:
        segments = _regular_plan(spec)

    logger.debug(f"{spec.describe()} -> {len(segments)} segments")
    return segments


def area(spec: ShapeSpec) -> float:
    """Enclosed area in cm^2; triangles use the sides as written"""
    if spec.kind is ShapeKind.TRIANGLE:
        return heron_area(*spec.sides)
    return regular_polygon_area(spec.kind.side_count, spec.sides[0])
