"""
Pytest fixtures for Cube Dash tests.
"""
import os
import random

import pytest

# Headless pygame for the UI adapter tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from cube_dash.gameplay.game import KeyState, SimulationCore
from cube_dash.gameplay.maze import Grid


# 7x5 room with a solid border
ROOM = [
    "#######",
    "#.....#",
    "#.....#",
    "#.....#",
    "#######",
]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def room() -> Grid:
    return Grid.from_rows(ROOM)


@pytest.fixture
def keys() -> KeyState:
    return KeyState()


@pytest.fixture
def core(rng, keys) -> SimulationCore:
    """A core on the default 40x30 maze, still on the title screen."""
    return SimulationCore(rng=rng, input_source=keys)


@pytest.fixture
def started_core(core) -> SimulationCore:
    """A core with a fresh level-1 game running."""
    core.new_game()
    return core
