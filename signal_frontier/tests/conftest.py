"""
Shared fixtures for engine tests.
"""

import random

import pytest

from signal_frontier.core.engine import Engine

from .support import FakeClock, ScriptedRandom


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    return Engine(rng=random.Random(42), clock=clock)


@pytest.fixture
def lucky_engine(clock):
    """Engine whose hazard rolls always pass."""
    return Engine(rng=ScriptedRandom(0.99), clock=clock)


@pytest.fixture
def unlucky_engine(clock):
    """Engine whose hazard rolls always fail when any hazard remains."""
    return Engine(rng=ScriptedRandom(0.0), clock=clock)
