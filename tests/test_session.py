"""Tests for session aggregation and the report."""

import os
import threading

import pytest

from shapebot._types import ShapeKind, ShapeSpec
from shapebot.errors import SessionFinalizedError
from shapebot.session import SessionAggregator, ShapeRecord, append_report


def square(side, duration_ms):
    return ShapeRecord.from_spec(ShapeSpec.regular(ShapeKind.SQUARE, side), duration_ms)


def triangle(a, b, c, duration_ms):
    return ShapeRecord.from_spec(ShapeSpec.triangle(a, b, c), duration_ms)


@pytest.fixture
def session():
    return SessionAggregator()


@pytest.fixture
def three_shapes(session):
    session.record_shape(square(40, 10000))
    session.record_shape(triangle(50, 40, 30, 20000))
    session.record_shape(square(60, 30000))
    return session


class TestShapeRecord:
    def test_square(self):
        record = square(40, 1234)
        assert record.area == 1600
        assert record.angles is None
        assert record.summary() == "Square: 40 (time: 1.23 seconds)"

    def test_triangle(self):
        record = triangle(50, 40, 30, 20000)
        assert record.area == pytest.approx(600.0)
        assert record.summary() == "Triangle: 50, 40, 30 (angles: 90.00, 126.87, 143.13; time: 20.00 seconds)"
        assert record.identifier() == "Triangle: 50"


class TestAggregation:
    def test_totals(self, three_shapes):
        assert three_shapes.count == 3
        assert three_shapes.total_duration_ms == 60000
        assert three_shapes.mean_duration_s == pytest.approx(20.0)

    def test_largest(self, three_shapes):
        assert three_shapes.largest.kind is ShapeKind.SQUARE
        assert three_shapes.largest.sides == (60,)

    def test_frequency(self, three_shapes):
        assert three_shapes.frequency == {ShapeKind.SQUARE: 2, ShapeKind.TRIANGLE: 1}
        assert three_shapes.most_frequent() == (ShapeKind.SQUARE, 2)

    def test_largest_tie_keeps_first(self, session):
        first = square(40, 1000)
        session.record_shape(first)
        session.record_shape(square(40, 2000))
        assert session.largest is first

    def test_frequency_tie_keeps_first_seen(self, session):
        session.record_shape(triangle(50, 40, 30, 1000))
        session.record_shape(square(20, 1000))
        assert session.most_frequent() == (ShapeKind.TRIANGLE, 1)

    def test_empty(self, session):
        assert session.count == 0
        assert session.largest is None
        assert session.mean_duration_s is None
        assert session.most_frequent() is None

    def test_concurrent_records(self, session):
        def worker():
            for _ in range(50):
                session.record_shape(square(30, 100))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert session.count == 400
        assert session.total_duration_ms == 40000
        assert session.frequency[ShapeKind.SQUARE] == 400


class TestRender:
    def test_full_report(self, three_shapes):
        assert three_shapes.render().splitlines() == [
            "Shapes drawn: Square: 40 (time: 10.00 seconds), "
            "Triangle: 50, 40, 30 (angles: 90.00, 126.87, 143.13; time: 20.00 seconds), "
            "Square: 60 (time: 30.00 seconds)",
            "Largest shape: Square: 60",
            "Most frequent shape: Square: 2 times",
            "Average time: 20.00 seconds",
        ]

    def test_empty_report(self, session):
        text = session.render()
        assert "No shapes drawn." in text
        assert text.splitlines()[0] == "Shapes drawn: none"

    def test_render_closes_session(self, three_shapes):
        three_shapes.render()
        assert three_shapes.finalized
        with pytest.raises(SessionFinalizedError):
            three_shapes.record_shape(square(20, 100))

    def test_render_twice_same_text(self, three_shapes):
        assert three_shapes.render() == three_shapes.render()


class TestAppendReport:
    def test_appends(self, tmp_path, three_shapes):
        path = tmp_path / "logs" / "shapes_log.txt"
        append_report("first\n", str(path))
        full_path = append_report(three_shapes.render(), str(path))

        content = path.read_text()
        assert content.startswith("first\n")
        assert "Largest shape: Square: 60" in content
        assert full_path == os.path.abspath(str(path))
