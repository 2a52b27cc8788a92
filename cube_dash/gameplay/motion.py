"""
Per-frame movement for the player and enemies.
NO UI DEPENDENCIES.

The player and enemies deliberately collide differently: the player is a
square tested at four corners, an enemy is a single point.
"""
import math
import random

from .constants import (
    PLAYER_STEP, PLAYER_MARGIN, ENEMY_STEP, ENEMY_CHASE_CHANCE,
    ENEMY_TIMER_BASE, ENEMY_TIMER_SPREAD,
)
from .entities import Direction, Enemy, Player
from .maze import Grid


def player_fits(grid: Grid, x: float, y: float) -> bool:
    """
    Check the player's collision square centred at (x, y).

    The far edge of each axis is floored and the near edge is ceiled, so the
    square may overhang a wall by up to the margin on the left and top.
    """
    far_x = math.floor(x + PLAYER_MARGIN)
    near_x = math.ceil(x - PLAYER_MARGIN)
    far_y = math.floor(y + PLAYER_MARGIN)
    near_y = math.ceil(y - PLAYER_MARGIN)
    return (
        grid.is_path(far_x, far_y)
        and grid.is_path(near_x, far_y)
        and grid.is_path(far_x, near_y)
        and grid.is_path(near_x, near_y)
    )


def move_player(player: Player, grid: Grid, left: bool, right: bool, up: bool, down: bool) -> bool:
    """
    Step the player along every held axis.

    Diagonals are not normalised. A blocked candidate is rejected as a whole,
    with no sliding along the free axis. Returns True if the player moved.
    """
    new_x = player.x
    new_y = player.y

    if left:
        new_x -= PLAYER_STEP
    if right:
        new_x += PLAYER_STEP
    if up:
        new_y -= PLAYER_STEP
    if down:
        new_y += PLAYER_STEP

    if (new_x, new_y) == (player.x, player.y):
        return False
    if not player_fits(grid, new_x, new_y):
        return False

    player.x = new_x
    player.y = new_y
    return True


def random_direction(rng: random.Random) -> Direction:
    return Direction(rng.randrange(4))


def direction_towards(enemy: Enemy, player: Player) -> Direction:
    """Pick the axis direction that most reduces distance to the player."""
    dx = player.x - enemy.x
    dy = player.y - enemy.y

    if abs(dx) >= abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def update_enemy(enemy: Enemy, player: Player, grid: Grid, rng: random.Random) -> None:
    """
    Run one frame of enemy AI and movement.

    When the decision timer runs out the enemy chases the player with
    ENEMY_CHASE_CHANCE, otherwise wanders. Running into a wall picks a new
    random direction straight away.
    """
    enemy.move_timer -= 1

    if enemy.move_timer <= 0:
        enemy.move_timer = ENEMY_TIMER_BASE + rng.random() * ENEMY_TIMER_SPREAD

        if rng.random() < ENEMY_CHASE_CHANCE:
            enemy.direction = direction_towards(enemy, player)
        else:
            enemy.direction = random_direction(rng)

    dx, dy = enemy.direction.delta()
    new_x = enemy.x + dx * ENEMY_STEP
    new_y = enemy.y + dy * ENEMY_STEP

    if grid.is_path(math.floor(new_x), math.floor(new_y)):
        enemy.x = new_x
        enemy.y = new_y
    else:
        enemy.direction = random_direction(rng)
