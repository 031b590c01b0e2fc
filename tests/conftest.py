"""Shared test fixtures: stand-ins for the camera, the robot and the clock."""

import pytest


class FakeClock:
    """Manual clock; sleeping advances it instead of blocking."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeRobot:
    """Records every command; drive() advances the clock by its duration."""

    def __init__(self, clock=None, fail_on_drive=None):
        self.clock = clock
        self.fail_on_drive = fail_on_drive or set()
        self.drives = []
        self.indicator = []
        self.stops = 0

    def drive(self, left_power, right_power, duration_ms):
        self.drives.append((left_power, right_power, duration_ms))
        if len(self.drives) in self.fail_on_drive:
            return False
        if self.clock is not None:
            self.clock.now += duration_ms / 1000.0
        return True

    def set_indicator(self, rgb):
        self.indicator.append(("on", tuple(rgb)))
        return True

    def clear_indicator(self):
        self.indicator.append(("off", None))
        return True

    def stop(self):
        self.stops += 1
        return True


class FakeScanner:
    def __init__(self, messages=None, error=None):
        self.messages = list(messages or [])
        self.error = error
        self.released = False

    def scan(self):
        if self.error is not None:
            raise self.error
        return self.messages.pop(0)

    def release(self):
        self.released = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def robot(clock):
    return FakeRobot(clock)
