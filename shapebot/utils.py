#!/usr/bin/env python3
"""
Utility functions for the Shape Drawing Robot
"""

import math
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def law_of_cosines_angle(opposite, adjacent_a, adjacent_b):
    """Interior angle (degrees) facing `opposite` in a triangle with the two other sides.

    Raises ValueError when the sides cannot close a triangle, since the
    cosine then falls outside [-1, 1].
    """
    cos_value = (adjacent_a ** 2 + adjacent_b ** 2 - opposite ** 2) / (2 * adjacent_a * adjacent_b)
    return math.degrees(math.acos(cos_value))


def heron_area(a, b, c):
    """Area of a triangle from its three sides"""
    s = (a + b + c) / 2.0
    return math.sqrt(s * (s - a) * (s - b) * (s - c))


def regular_polygon_area(n_sides, side):
    """Area of a regular polygon with n_sides sides of length `side`"""
    if n_sides == 4:
        return float(side * side)
    if n_sides == 5:
        return 0.25 * math.sqrt(5 * (5 + 2 * math.sqrt(5))) * side ** 2
    if n_sides == 6:
        return (3 * math.sqrt(3) / 2.0) * side ** 2
    raise ValueError("No area formula for a {}-sided polygon".format(n_sides))


def format_seconds(duration_ms):
    """Milliseconds to a seconds string with 2 decimals"""
    return "{:.2f}".format(duration_ms / 1000.0)
