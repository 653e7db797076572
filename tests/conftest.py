import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest


class FixedRng:
    """Stand-in for random.Random that always rolls the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a

    def choice(self, seq):
        return seq[0]


class FakeStore:
    def __init__(self, high_score: int = 0) -> None:
        self.high_score = high_score
        self.reads = 0
        self.writes: list[int] = []

    def read_high_score(self) -> int:
        self.reads += 1
        return self.high_score

    def write_high_score(self, value: int) -> None:
        self.writes.append(value)
        self.high_score = value


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()
