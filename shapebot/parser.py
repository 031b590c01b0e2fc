#!/usr/bin/env python3
"""
Descriptor Parser

Reads the text decoded from a QR code, e.g. ``S-40&T-50-40-30&H-25``, and
returns one ParseOutcome per shape token in the order written. A bad token
is reported on its own outcome and the remaining tokens are still parsed;
only a batch of more than MAX_SHAPES tokens is rejected as a whole.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional

from ._types import ShapeKind, ShapeSpec
from .config import MIN_SIDE_CM, MAX_SIDE_CM, MAX_SHAPES, ENFORCE_TRIANGLE_SIDE_BOUNDS
from .errors import (
    ParseError, UnknownShapeFormatError, InvalidNumberError, OutOfRangeError,
    MalformedTriangleError, InvalidTriangleError, TooManyShapesError
)
from .geometry import is_valid_triangle

logger = logging.getLogger(__name__)

SHAPE_SEPARATOR = "&"
FIELD_SEPARATOR = "-"

_INTEGER = re.compile(r"[+-]?\d+")

# Sides were read as 32-bit ints on the robot; anything wider is not a number
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one token: exactly one of spec / error is set."""
    token: str
    spec: Optional[ShapeSpec] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_fields(text: str, separator: str) -> List[str]:
    """Split like the robot's original firmware: trailing empty fields are dropped"""
    parts = text.split(separator)
    if len(parts) > 1:
        while parts and parts[-1] == "":
            parts.pop()
    return parts


def _parse_int(text: str) -> Optional[int]:
    if _INTEGER.fullmatch(text) is None:
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def _in_bounds(value: int) -> bool:
    return MIN_SIDE_CM <= value <= MAX_SIDE_CM


def _parse_regular(token: str, kind: ShapeKind) -> ParseOutcome:
    body = token[2:]
    side = _parse_int(body)
    if side is None:
        return ParseOutcome(token, error=InvalidNumberError(kind, body))
    if not _in_bounds(side):
        return ParseOutcome(token, error=OutOfRangeError(kind, side))
    return ParseOutcome(token, spec=ShapeSpec.regular(kind, side))


def _parse_triangle(token: str, enforce_bounds: bool) -> ParseOutcome:
    fields = split_fields(token[2:], FIELD_SEPARATOR)
    if len(fields) != 3:
        return ParseOutcome(token, error=MalformedTriangleError(token))

    sides = []
    for field in fields:
        value = _parse_int(field)
        if value is None:
            return ParseOutcome(token, error=InvalidNumberError(ShapeKind.TRIANGLE, field))
        sides.append(value)

    if enforce_bounds:
        for value in sides:
            if not _in_bounds(value):
                return ParseOutcome(token, error=OutOfRangeError(ShapeKind.TRIANGLE, value))

    if not is_valid_triangle(*sides):
        return ParseOutcome(token, error=InvalidTriangleError(sides))

    return ParseOutcome(token, spec=ShapeSpec.triangle(*sides))


def parse_token(token: str, enforce_triangle_bounds: bool = ENFORCE_TRIANGLE_SIDE_BOUNDS) -> ParseOutcome:
    """Parse a single shape token such as ``P-30``"""
    kind = None
    if len(token) >= 2 and token[1] == FIELD_SEPARATOR:
        kind = ShapeKind.from_prefix(token[0])

    if kind is None:
        return ParseOutcome(token, error=UnknownShapeFormatError(token))
    if kind is ShapeKind.TRIANGLE:
        return _parse_triangle(token, enforce_triangle_bounds)
    return _parse_regular(token, kind)


def parse(raw: str, enforce_triangle_bounds: bool = ENFORCE_TRIANGLE_SIDE_BOUNDS) -> List[ParseOutcome]:
    """Parse a whole descriptor. Raises TooManyShapesError for oversized batches."""
    tokens = split_fields(raw, SHAPE_SEPARATOR)
    if len(tokens) > MAX_SHAPES:
        raise TooManyShapesError(len(tokens))

    outcomes = [parse_token(token, enforce_triangle_bounds) for token in tokens]
    valid = sum(1 for outcome in outcomes if outcome.ok)
    logger.info(f"Parsed {len(outcomes)} shape(s) from '{raw}': {valid} valid")
    return outcomes
