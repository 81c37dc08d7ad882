"""
Test doubles: a controllable clock and a scripted random source.
"""

import random


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms


class ScriptedRandom(random.Random):
    """
    Random source whose random() returns a fixed value and whose choice()
    picks a fixed index, so hazard and pulse outcomes are predictable.
    """

    def __init__(self, value: float = 0.99, index: int = 0):
        super().__init__(0)
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[self.index % len(seq)]
