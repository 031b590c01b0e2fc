#!/usr/bin/env python3
"""
Session Aggregator

Collects one ShapeRecord per finished shape and renders the end-of-session
summary that is appended to the report file.
"""

import os
import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._types import ShapeKind, ShapeSpec
from .errors import SessionFinalizedError
from .geometry import area, exterior_angles
from .utils import format_seconds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeRecord:
    """A shape the robot finished drawing"""
    kind: ShapeKind
    sides: Tuple[int, ...]
    area: float
    duration_ms: int
    angles: Optional[Tuple[float, ...]] = None

    @classmethod
    def from_spec(cls, spec: ShapeSpec, duration_ms: int) -> "ShapeRecord":
        angles = exterior_angles(*spec.sides) if spec.kind is ShapeKind.TRIANGLE else None
        return cls(spec.kind, spec.sides, area(spec), duration_ms, angles)

    def identifier(self) -> str:
        # Triangles are identified by their first side only
        return "{}: {}".format(self.kind.label, self.sides[0])

    def summary(self) -> str:
        seconds = format_seconds(self.duration_ms)
        if self.angles is None:
            return "{} (time: {} seconds)".format(self.identifier(), seconds)
        return "{}: {} (angles: {}; time: {} seconds)".format(
            self.kind.label,
            ", ".join(str(s) for s in self.sides),
            ", ".join("{:.2f}".format(a) for a in self.angles),
            seconds,
        )


class SessionAggregator:
    """Running totals for one drawing session.

    record_shape and render share one lock, so shapes may be completed from
    a different thread than the one that created the session.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.records: List[ShapeRecord] = []
        self.total_duration_ms = 0
        self.frequency: Dict[ShapeKind, int] = {}
        self.largest: Optional[ShapeRecord] = None
        self._report: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def finalized(self) -> bool:
        return self._report is not None

    @property
    def mean_duration_s(self) -> Optional[float]:
        if not self.records:
            return None
        return self.total_duration_ms / len(self.records) / 1000.0

    def most_frequent(self) -> Optional[Tuple[ShapeKind, int]]:
        """Most drawn kind; on a tie the kind drawn first wins"""
        if not self.frequency:
            return None
        kind = max(self.frequency, key=self.frequency.get)
        return kind, self.frequency[kind]

    def record_shape(self, record: ShapeRecord):
        with self._lock:
            if self._report is not None:
                raise SessionFinalizedError("Session already reported; cannot record {}".format(record.identifier()))

            self.records.append(record)
            self.total_duration_ms += record.duration_ms
            self.frequency[record.kind] = self.frequency.get(record.kind, 0) + 1

            if self.largest is None or record.area > self.largest.area:
                self.largest = record

        logger.info(f"Recorded {record.identifier()} in {format_seconds(record.duration_ms)}s "
                    f"({self.count} shape(s) this session)")

    def render(self) -> str:
        """Final report text. Closes the session; later calls return the same text."""
        with self._lock:
            if self._report is None:
                self._report = self._render_locked()
            return self._report

    def _render_locked(self) -> str:
        if not self.records:
            lines = [
                "Shapes drawn: none",
                "Largest shape: none",
                "Most frequent shape: No shapes drawn",
                "No shapes drawn.",
            ]
            return "\n".join(lines) + "\n"

        kind, times = self.most_frequent()
        lines = [
            "Shapes drawn: " + ", ".join(record.summary() for record in self.records),
            "Largest shape: " + self.largest.identifier(),
            "Most frequent shape: {}: {} times".format(kind.label, times),
            "Average time: {:.2f} seconds".format(self.mean_duration_s),
        ]
        return "\n".join(lines) + "\n"


def append_report(text: str, path: str) -> str:
    """Append one session's report to the log file, returning its absolute path"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "a") as f:
        f.write(text)
    full_path = os.path.abspath(path)
    logger.info(f"Data has been successfully saved to the log file: {full_path}")
    return full_path
