"""
Tests for pickups, enemy contact and scoring.
"""
import logging

import pytest

from cube_dash.gameplay.collisions import (
    touching, collect_coins, collect_power_ups, resolve_enemy_contacts,
    resolve_collisions,
)
from cube_dash.gameplay.constants import (
    COIN_SCORE, POWER_UP_SCORE, ENEMY_SCORE, POWER_UP_DURATION, START_LIVES,
)
from cube_dash.gameplay.entities import Coin, Direction, Enemy, Player, PowerUp, ScoreBoard
from cube_dash.gameplay.events import (
    CoinCollectedEvent, PowerUpCollectedEvent, EnemyDefeatedEvent, PlayerHitEvent,
)


def enemy_at(x, y):
    return Enemy(x=x, y=y, direction=Direction.UP, move_timer=10)


class TestTouching:
    """Tests for the per-axis proximity test."""

    def test_strictly_inside(self):
        assert touching((1.0, 1.0), (1.4, 0.6), 0.5)

    def test_boundary_excluded(self):
        assert not touching((1.5, 1.0), (1.0, 1.0), 0.5)

    def test_square_not_circle(self):
        """A diagonal offset a circle would reject still counts."""
        assert touching((1.49, 1.49), (1.0, 1.0), 0.5)


class TestCoins:
    """Tests for coin collection."""

    def test_collect_coin(self):
        player = Player(2.0, 3.0)
        coin = Coin(2, 3)
        board = ScoreBoard()

        events = collect_coins(player, [coin], board)

        assert coin.collected
        assert board.score == COIN_SCORE
        assert events == [CoinCollectedEvent(2, 3)]

    def test_collect_once(self):
        """A collected coin does not score again."""
        player = Player(2.0, 3.0)
        coin = Coin(2, 3)
        board = ScoreBoard()

        collect_coins(player, [coin], board)
        events = collect_coins(player, [coin], board)

        assert coin.collected
        assert board.score == COIN_SCORE
        assert events == []

    def test_far_coin_untouched(self):
        player = Player(1.0, 1.0)
        coin = Coin(2, 1)
        board = ScoreBoard()

        collect_coins(player, [coin], board)

        assert not coin.collected
        assert board.score == 0

    def test_two_coins_same_cell(self):
        """Stacked coins are all picked up together."""
        player = Player(4.0, 4.0)
        coins = [Coin(4, 4), Coin(4, 4)]
        board = ScoreBoard()

        collect_coins(player, coins, board)

        assert all(c.collected for c in coins)
        assert board.score == 2 * COIN_SCORE


class TestPowerUps:
    """Tests for power-up collection."""

    def test_collect_power_up(self):
        player = Player(3.0, 1.0)
        power_up = PowerUp(3, 1)
        board = ScoreBoard()

        events = collect_power_ups(player, [power_up], board)

        assert power_up.collected
        assert board.power_up_time == POWER_UP_DURATION
        assert board.score == POWER_UP_SCORE
        assert board.empowered
        assert events == [PowerUpCollectedEvent(3, 1)]

    def test_timer_restarts_not_stacks(self):
        player = Player(3.0, 1.0)
        board = ScoreBoard(power_up_time=120)

        collect_power_ups(player, [PowerUp(3, 1)], board)

        assert board.power_up_time == POWER_UP_DURATION

    def test_collected_power_up_ignored(self):
        player = Player(3.0, 1.0)
        board = ScoreBoard()

        collect_power_ups(player, [PowerUp(3, 1, collected=True)], board)

        assert board.power_up_time == 0
        assert board.score == 0


class TestEnemyContact:
    """Tests for player/enemy contact."""

    def test_empowered_defeats_enemy(self):
        player = Player(5.0, 5.0)
        target = enemy_at(5.3, 5.0)
        bystander = enemy_at(9.0, 9.0)
        enemies = [target, bystander]
        board = ScoreBoard(power_up_time=100)

        events = resolve_enemy_contacts(player, enemies, board)

        assert enemies == [bystander]
        assert board.score == ENEMY_SCORE
        assert board.lives == START_LIVES
        assert events == [EnemyDefeatedEvent(5.3, 5.0)]

    def test_adjacent_enemies_all_defeated(self):
        """Deferred removal means no touching enemy is skipped."""
        player = Player(5.0, 5.0)
        enemies = [enemy_at(5.0, 5.0), enemy_at(5.2, 5.2), enemy_at(4.7, 5.0)]
        board = ScoreBoard(power_up_time=1)

        resolve_enemy_contacts(player, enemies, board)

        assert enemies == []
        assert board.score == 3 * ENEMY_SCORE

    def test_contact_range(self):
        player = Player(5.0, 5.0)
        enemies = [enemy_at(5.7, 5.0)]
        board = ScoreBoard(power_up_time=1)

        resolve_enemy_contacts(player, enemies, board)

        assert len(enemies) == 1

    def test_hit_costs_life_and_resets_player(self):
        player = Player(5.0, 5.0)
        enemies = [enemy_at(5.0, 5.5)]
        board = ScoreBoard()

        events = resolve_enemy_contacts(player, enemies, board)

        assert board.lives == START_LIVES - 1
        assert player.position == (1.0, 1.0)
        assert len(enemies) == 1
        assert events == [PlayerHitEvent(START_LIVES - 1)]

    def test_hit_leaves_items_alone(self):
        """Only the player is reset, pickups stay as they were."""
        player = Player(5.0, 5.0)
        coins = [Coin(8, 8, collected=True), Coin(9, 9)]
        board = ScoreBoard(score=70)

        resolve_collisions(player, coins, [], [enemy_at(5.0, 5.0)], board)

        assert coins[0].collected
        assert not coins[1].collected
        assert board.score == 70

    def test_later_enemy_tested_at_reset_position(self):
        """After a hit the rest of the pass sees the player back at the start."""
        player = Player(5.0, 5.0)
        enemies = [enemy_at(5.0, 5.0), enemy_at(1.2, 1.0)]
        board = ScoreBoard()

        resolve_enemy_contacts(player, enemies, board)

        assert board.lives == START_LIVES - 2

    def test_last_life_stops_pass(self):
        """Lives never go below zero even with several enemies touching."""
        player = Player(5.0, 5.0)
        enemies = [enemy_at(5.0, 5.0), enemy_at(5.1, 5.0)]
        board = ScoreBoard(lives=1)

        events = resolve_enemy_contacts(player, enemies, board)

        assert board.lives == 0
        assert events == [PlayerHitEvent(0)]
        # Player is not sent home on the fatal hit
        assert player.position == (5.0, 5.0)


class TestCollisionLogging:
    """Tests for the debug trail of power-ups, defeats and hits."""

    def test_power_up_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cube_dash.gameplay.collisions"):
            collect_power_ups(Player(3.0, 1.0), [PowerUp(3, 1)], ScoreBoard())

        assert ["Power-up collected at (3, 1)"] == [r.getMessage() for r in caplog.records]
        assert caplog.records[0].levelno == logging.DEBUG

    def test_defeat_logged(self, caplog):
        board = ScoreBoard(power_up_time=10)
        with caplog.at_level(logging.DEBUG, logger="cube_dash.gameplay.collisions"):
            resolve_enemy_contacts(Player(5.0, 5.0), [enemy_at(5.25, 5.0)], board)

        assert [r.getMessage() for r in caplog.records] == ["Enemy defeated at (5.25, 5.00)"]

    def test_hit_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cube_dash.gameplay.collisions"):
            resolve_enemy_contacts(Player(5.0, 5.0), [enemy_at(5.0, 5.0)], ScoreBoard())

        assert [r.getMessage() for r in caplog.records] == [f"Player hit, {START_LIVES - 1} lives left"]

    def test_coins_stay_quiet(self, caplog):
        """Coins are too frequent to log one by one."""
        with caplog.at_level(logging.DEBUG, logger="cube_dash.gameplay.collisions"):
            collect_coins(Player(2.0, 3.0), [Coin(2, 3)], ScoreBoard())

        assert caplog.records == []


class TestResolveCollisions:
    """Tests for the combined pass."""

    def test_pass_order(self):
        """Coins, then power-ups, then enemies: the power-up protects in the same frame."""
        player = Player(6.0, 6.0)
        coins = [Coin(6, 6)]
        power_ups = [PowerUp(6, 6)]
        enemies = [enemy_at(6.0, 6.0)]
        board = ScoreBoard()

        events = resolve_collisions(player, coins, power_ups, enemies, board)

        assert [type(e) for e in events] == [
            CoinCollectedEvent, PowerUpCollectedEvent, EnemyDefeatedEvent,
        ]
        assert board.score == COIN_SCORE + POWER_UP_SCORE + ENEMY_SCORE
        assert board.lives == START_LIVES
        assert enemies == []

    def test_nothing_touching(self):
        board = ScoreBoard()
        events = resolve_collisions(Player(), [Coin(5, 5)], [PowerUp(7, 7)], [enemy_at(9.0, 9.0)], board)
        assert events == []
        assert board == ScoreBoard()
