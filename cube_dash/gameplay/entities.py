"""
Game entities: Player, Enemy, Coin, PowerUp and the score board.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .constants import PLAYER_START, START_LEVEL, START_LIVES


class Direction(IntEnum):
    """Enemy facing. Values match the random draw in [0, 4)."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass
class Player:
    """The player cube. Position is continuous, in cell-units."""
    x: float = PLAYER_START[0]
    y: float = PLAYER_START[1]

    def reset(self) -> None:
        """Send the player back to the start cell."""
        self.x, self.y = PLAYER_START

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(eq=False)
class Enemy:
    """
    A roaming enemy.

    move_timer counts down one per frame; at zero the enemy picks a new
    direction. Compared by identity so two enemies on the same spot stay
    distinct.
    """
    x: float
    y: float
    direction: Direction
    move_timer: float
    defeated: bool = False

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Pickup:
    """A static item sitting on a maze cell."""
    x: int
    y: int
    collected: bool = False


class Coin(Pickup):
    """Worth COIN_SCORE. Collecting them all clears the level."""


class PowerUp(Pickup):
    """Empowers the player for POWER_UP_DURATION frames."""


@dataclass
class ScoreBoard:
    """Counters that outlive a single level."""
    score: int = 0
    level: int = START_LEVEL
    lives: int = START_LIVES
    power_up_time: int = 0

    @property
    def empowered(self) -> bool:
        return self.power_up_time > 0

    def reset(self) -> None:
        """Fresh counters for a brand-new game."""
        self.score = 0
        self.level = START_LEVEL
        self.lives = START_LIVES
        self.power_up_time = 0
