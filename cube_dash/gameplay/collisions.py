"""
Collision and scoring passes, run once per frame.
NO UI DEPENDENCIES.
"""
import logging
from typing import List, Sequence, Tuple

from .constants import (
    PICKUP_RANGE, ENEMY_CONTACT_RANGE, COIN_SCORE, POWER_UP_SCORE,
    ENEMY_SCORE, POWER_UP_DURATION,
)
from .entities import Coin, Enemy, Player, PowerUp, ScoreBoard
from .events import (
    GameEvent, CoinCollectedEvent, PowerUpCollectedEvent,
    EnemyDefeatedEvent, PlayerHitEvent,
)

logger = logging.getLogger(__name__)


def touching(a: Tuple[float, float], b: Tuple[float, float], reach: float) -> bool:
    """Per-axis proximity test (a square, not a circle)."""
    return abs(a[0] - b[0]) < reach and abs(a[1] - b[1]) < reach


def collect_coins(player: Player, coins: Sequence[Coin], board: ScoreBoard) -> List[GameEvent]:
    events: List[GameEvent] = []
    for coin in coins:
        if not coin.collected and touching(player.position, (coin.x, coin.y), PICKUP_RANGE):
            coin.collected = True
            board.score += COIN_SCORE
            events.append(CoinCollectedEvent(coin.x, coin.y))
    return events


def collect_power_ups(player: Player, power_ups: Sequence[PowerUp], board: ScoreBoard) -> List[GameEvent]:
    """Picking up a power-up restarts the timer, it does not stack."""
    events: List[GameEvent] = []
    for power_up in power_ups:
        if not power_up.collected and touching(player.position, (power_up.x, power_up.y), PICKUP_RANGE):
            power_up.collected = True
            board.power_up_time = POWER_UP_DURATION
            board.score += POWER_UP_SCORE
            events.append(PowerUpCollectedEvent(power_up.x, power_up.y))
            logger.debug(f"Power-up collected at ({power_up.x}, {power_up.y})")
    return events


def resolve_enemy_contacts(player: Player, enemies: List[Enemy], board: ScoreBoard) -> List[GameEvent]:
    """
    Resolve player/enemy contact.

    Empowered: every touching enemy is defeated. Defeated enemies are only
    marked during the pass and compacted out of `enemies` at the end, so no
    enemy is skipped.

    Not empowered: each touching enemy costs a life and sends the player back
    to the start; later enemies are tested against the new position. The pass
    stops as soon as lives run out.
    """
    events: List[GameEvent] = []

    for enemy in enemies:
        if not touching(player.position, enemy.position, ENEMY_CONTACT_RANGE):
            continue

        if board.empowered:
            enemy.defeated = True
            board.score += ENEMY_SCORE
            events.append(EnemyDefeatedEvent(enemy.x, enemy.y))
            logger.debug(f"Enemy defeated at ({enemy.x:.2f}, {enemy.y:.2f})")
            continue

        board.lives -= 1
        events.append(PlayerHitEvent(board.lives))
        logger.debug(f"Player hit, {board.lives} lives left")
        if board.lives <= 0:
            break
        player.reset()

    if any(enemy.defeated for enemy in enemies):
        enemies[:] = [enemy for enemy in enemies if not enemy.defeated]

    return events


def resolve_collisions(
    player: Player,
    coins: Sequence[Coin],
    power_ups: Sequence[PowerUp],
    enemies: List[Enemy],
    board: ScoreBoard,
) -> List[GameEvent]:
    """Run the coin, power-up and enemy passes in that order."""
    events = collect_coins(player, coins, board)
    events.extend(collect_power_ups(player, power_ups, board))
    events.extend(resolve_enemy_contacts(player, enemies, board))
    return events
