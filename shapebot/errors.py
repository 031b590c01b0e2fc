#!/usr/bin/env python3
"""
Error types for the Shape Drawing Robot

Parse errors are handed back as values on a ParseOutcome so one bad token
never stops the rest of a batch. Plan errors are raised and abort a single
shape. Nothing in here is fatal to the program.
"""

from .config import MIN_SIDE_CM, MAX_SIDE_CM, MAX_SHAPES


class ShapeError(Exception):
    """Base class for every error raised by the shape pipeline"""


# ---------------------------------------------------------------------------
# Descriptor parsing
# ---------------------------------------------------------------------------

class ParseError(ShapeError):
    """A descriptor token could not be turned into a shape"""


class UnknownShapeFormatError(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(
            "Invalid shape format '{}'. It must begin with the first letter of the shape "
            "(Square, Triangle, Pentagon, or Hexagon), e.g. 'S-xx&T-xx-yy-zz'".format(token)
        )


class InvalidNumberError(ParseError):
    def __init__(self, kind, text: str):
        self.kind = kind
        self.text = text
        super().__init__(
            "Invalid input for {}: '{}' is not an integer between {} and {} cm".format(
                kind.label.lower(), text, MIN_SIDE_CM, MAX_SIDE_CM)
        )


class OutOfRangeError(ParseError):
    def __init__(self, kind, value: int):
        self.kind = kind
        self.value = value
        super().__init__(
            "{} side length must be between {} and {} cm (got {})".format(
                kind.label, MIN_SIDE_CM, MAX_SIDE_CM, value)
        )


class MalformedTriangleError(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(
            "Triangle format incorrect in '{}' (T-xx-yy-zz, where xx, yy and zz are "
            "integers between {} and {} cm)".format(token, MIN_SIDE_CM, MAX_SIDE_CM)
        )


class InvalidTriangleError(ParseError):
    def __init__(self, sides):
        self.sides = tuple(sides)
        super().__init__("Invalid triangle: sides {} break the triangle inequality".format(self.sides))


class TooManyShapesError(ParseError):
    def __init__(self, count: int):
        self.count = count
        super().__init__("You can only enter a maximum of {} shapes (got {})".format(MAX_SHAPES, count))


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------

class PlanError(ShapeError):
    """A valid shape could not be turned into motion commands"""


class GeometryError(PlanError):
    pass


class DegenerateTriangleError(GeometryError):
    def __init__(self, sides):
        self.sides = tuple(sides)
        super().__init__("Sides {} do not enclose a triangle".format(self.sides))


class NonPositiveSideError(GeometryError):
    def __init__(self, sides):
        self.sides = tuple(sides)
        super().__init__("Side lengths must be positive (got {})".format(self.sides))


class DistanceError(PlanError):
    pass


class DistanceOutOfRangeError(DistanceError):
    def __init__(self, distance_cm, min_cm, max_cm):
        self.distance_cm = distance_cm
        super().__init__("Distance must be between {} and {} cm (got {})".format(min_cm, max_cm, distance_cm))


class InvalidDurationError(DistanceError):
    def __init__(self, distance_cm, duration_ms):
        self.distance_cm = distance_cm
        self.duration_ms = duration_ms
        super().__init__("Invalid movement time {} ms for {} cm".format(duration_ms, distance_cm))


# ---------------------------------------------------------------------------
# Collaborators and session
# ---------------------------------------------------------------------------

class DecodeTimeoutError(ShapeError):
    def __init__(self, timeout_s):
        self.timeout_s = timeout_s
        super().__init__("No QR code detected within {} seconds".format(timeout_s))


class ActuationError(ShapeError):
    """The robot did not acknowledge a motion command"""


class SessionFinalizedError(ShapeError):
    """A shape was recorded after the session report was rendered"""
