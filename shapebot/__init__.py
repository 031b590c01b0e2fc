"""
Shape Drawing Robot Package

Reads shape descriptors from QR codes and drives a wheeled robot around
each shape using timed, open-loop motor commands.
"""

__version__ = "1.0.0"
__author__ = "Shape Drawing Team"

# Import main classes for convenience
from ._types import ShapeKind, ShapeSpec, SideSegment
from .parser import parse, ParseOutcome
from .planner import build, MotionCommand, CommandKind
from .session import SessionAggregator, ShapeRecord

__all__ = [
    'ShapeKind',
    'ShapeSpec',
    'SideSegment',
    'parse',
    'ParseOutcome',
    'build',
    'MotionCommand',
    'CommandKind',
    'SessionAggregator',
    'ShapeRecord',
]
