"""
Shared fixtures and test doubles for the game loop.
"""

import random

import pytest

from flappy_term.constants import GameConfig


class FakeClock:
    """Manual clock: time only moves when the loop sleeps."""

    def __init__(self):
        self.t = 0.0
        self.sleeps = []

    def now(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds


class ScriptedInput:
    """Returns the scripted commands in order, then None forever."""

    def __init__(self, commands=()):
        self.commands = list(commands)
        self.timeouts = []

    def poll_command(self, timeout):
        self.timeouts.append(timeout)
        if self.commands:
            return self.commands.pop(0)
        return None


class RecordingRenderer:
    def __init__(self):
        self.frames = []
        self.statuses = []

    def present(self, grid):
        self.frames.append(grid.render())

    def status(self, score, fps):
        self.statuses.append((score, fps))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def floating_config():
    """No gravity and no spawns, so the player hangs at mid-grid."""
    return GameConfig(gravity_per_tick=0.0,
                      spawn_interval_min=100000, spawn_interval_max=100001)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()
