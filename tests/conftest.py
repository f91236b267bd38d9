"""
Shared stubs for the arena tests.
"""

import pytest

from arena.events.event_system import RecordingEventSink


class FixedRandomSource:
    """RandomSource returning the same value on every draw, recording the ranges."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class SequenceRandomSource:
    """RandomSource returning scripted values in order."""

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.values.pop(0)


@pytest.fixture
def sink():
    return RecordingEventSink()


@pytest.fixture
def fixed_heal():
    """Heals 50 on every round."""
    return FixedRandomSource(50)
