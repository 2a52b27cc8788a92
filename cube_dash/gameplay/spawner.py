"""
Item and enemy placement by rejection sampling.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Callable, List, Tuple

from .constants import (
    COINS_BASE, COINS_PER_LEVEL, POWER_UPS_BASE, ENEMIES_BASE,
    ENEMY_MIN_SPAWN_DISTANCE, ENEMY_INITIAL_TIMER, MAX_SPAWN_ATTEMPTS,
    PLAYER_START,
)
from .entities import Coin, Direction, Enemy, PowerUp
from .maze import Grid

logger = logging.getLogger(__name__)

_START_CELL = (int(PLAYER_START[0]), int(PLAYER_START[1]))


class SpawnFailure(RuntimeError):
    """Raised when no valid cell turned up within the attempt budget."""

    def __init__(self, kind: str, attempts: int):
        super().__init__(f"Could not place {kind} after {attempts} attempts")
        self.kind = kind
        self.attempts = attempts


def coin_count(level: int) -> int:
    return COINS_BASE + level * COINS_PER_LEVEL


def power_up_count(level: int) -> int:
    return POWER_UPS_BASE + level // 2


def enemy_count(level: int) -> int:
    return ENEMIES_BASE + level


def manhattan(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def can_host_enemies(rows: int, cols: int) -> bool:
    """True if the far interior corner is far enough from the start cell for an enemy."""
    return manhattan((cols - 2, rows - 2), _START_CELL) >= ENEMY_MIN_SPAWN_DISTANCE


class Spawner:
    """
    Places coins, power-ups and enemies on PATH cells of a grid.

    Each placement draws uniformly random cells until one satisfies the
    constraints. Items may share a cell with each other.
    """

    def __init__(self, grid: Grid, rng: random.Random, max_attempts: int = MAX_SPAWN_ATTEMPTS):
        self.grid = grid
        self.rng = rng
        self.max_attempts = max_attempts

    def _random_cell(self, kind: str, accept: Callable[[int, int], bool]) -> Tuple[int, int]:
        """Draw cells until accept(x, y) holds, or raise SpawnFailure."""
        for _ in range(self.max_attempts):
            x = self.rng.randrange(self.grid.width)
            y = self.rng.randrange(self.grid.height)
            if self.grid.is_path(x, y) and accept(x, y):
                return x, y
        raise SpawnFailure(kind, self.max_attempts)

    def _pickup_cell(self, kind: str) -> Tuple[int, int]:
        return self._random_cell(kind, lambda x, y: (x, y) != _START_CELL)

    def spawn_coins(self, level: int) -> List[Coin]:
        coins = []
        for _ in range(coin_count(level)):
            x, y = self._pickup_cell("coin")
            coins.append(Coin(x, y))
        return coins

    def spawn_power_ups(self, level: int) -> List[PowerUp]:
        power_ups = []
        for _ in range(power_up_count(level)):
            x, y = self._pickup_cell("power-up")
            power_ups.append(PowerUp(x, y))
        return power_ups

    def spawn_enemies(self, level: int) -> List[Enemy]:
        """
        Place enemies far enough from the start cell.
        Each gets a random first-decision timer and facing.
        """
        enemies = []
        for _ in range(enemy_count(level)):
            x, y = self._random_cell(
                "enemy",
                lambda x, y: manhattan((x, y), _START_CELL) >= ENEMY_MIN_SPAWN_DISTANCE,
            )
            enemies.append(Enemy(
                x=float(x),
                y=float(y),
                move_timer=self.rng.random() * ENEMY_INITIAL_TIMER,
                direction=Direction(self.rng.randrange(4)),
            ))
        logger.debug(f"Spawned {len(enemies)} enemies for level {level}")
        return enemies
