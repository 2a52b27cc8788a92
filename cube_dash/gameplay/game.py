"""
Simulation core - owns all game state and advances it one frame at a time.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from typing import List, Optional, Protocol, Set

from .collisions import resolve_collisions
from .constants import (
    MAZE_ROWS, MAZE_COLS, MIN_MAZE_SIZE, MAX_SPAWN_ATTEMPTS, MAX_MAZE_ATTEMPTS,
    KEY_MOVE_LEFT, KEY_MOVE_RIGHT, KEY_MOVE_UP, KEY_MOVE_DOWN, KEY_START,
)
from .drawing import RenderSnapshot
from .entities import Coin, Enemy, Player, PowerUp, ScoreBoard
from .events import GameEvent, GameState, LevelStartedEvent, PhaseChangedEvent
from .maze import Cell, Grid, generate_maze
from .motion import move_player, update_enemy
from .spawner import Spawner, SpawnFailure, can_host_enemies

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    """Anything that can report whether a logical key is held right now."""

    def is_key_down(self, key: str) -> bool:
        ...


class UISink(Protocol):
    """Receives the HUD counters once per simulated frame."""

    def set_score(self, score: int) -> None:
        ...

    def set_level(self, level: int) -> None:
        ...

    def set_lives(self, lives: int) -> None:
        ...


class KeyState:
    """
    Input source backed by a set of held logical keys.
    Used by tests and headless hosts.
    """

    def __init__(self):
        self._down: Set[str] = set()

    def press(self, key: str) -> None:
        self._down.add(key)

    def release(self, key: str) -> None:
        self._down.discard(key)

    def release_all(self) -> None:
        self._down.clear()

    def is_key_down(self, key: str) -> bool:
        return key in self._down


class SimulationCore:
    """
    The game: maze, player, enemies, pickups and counters.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        core = SimulationCore(rng=random.Random(42))
        core.new_game()
        while core.state == GameState.PLAYING:
            events = core.advance()
            # UI reads core.render_snapshot() and draws
    """

    def __init__(
        self,
        rows: int = MAZE_ROWS,
        cols: int = MAZE_COLS,
        rng: Optional[random.Random] = None,
        input_source: Optional[InputSource] = None,
        ui_sink: Optional[UISink] = None,
        max_spawn_attempts: int = MAX_SPAWN_ATTEMPTS,
        max_maze_attempts: int = MAX_MAZE_ATTEMPTS,
    ):
        if rows < MIN_MAZE_SIZE or cols < MIN_MAZE_SIZE:
            raise ValueError(f"Grid must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {cols}x{rows}")
        if not can_host_enemies(rows, cols):
            raise ValueError(f"Grid {cols}x{rows} has no cell far enough from the start for enemies")

        self.rows = rows
        self.cols = cols
        self.rng = rng if rng is not None else random.Random()
        self.input = input_source if input_source is not None else KeyState()
        self.ui_sink = ui_sink
        self.max_spawn_attempts = max_spawn_attempts
        self.max_maze_attempts = max_maze_attempts

        self.state = GameState.WAITING
        self.board = ScoreBoard()
        self.player = Player()
        self.enemies: List[Enemy] = []
        self.coins: List[Coin] = []
        self.power_ups: List[PowerUp] = []

        # Backdrop for the title screen
        self.grid: Grid = generate_maze(rows, cols, self.rng)

        self.frame = 0
        self._start_was_down = False
        self._events: List[GameEvent] = []

    # =========================================================================
    # COUNTERS (readable and writable for test harnesses)
    # =========================================================================

    @property
    def score(self) -> int:
        return self.board.score

    @score.setter
    def score(self, value: int) -> None:
        self.board.score = value

    @property
    def level(self) -> int:
        return self.board.level

    @level.setter
    def level(self, value: int) -> None:
        self.board.level = value

    @property
    def lives(self) -> int:
        return self.board.lives

    @lives.setter
    def lives(self, value: int) -> None:
        self.board.lives = value

    @property
    def power_up_time(self) -> int:
        return self.board.power_up_time

    @power_up_time.setter
    def power_up_time(self, value: int) -> None:
        self.board.power_up_time = max(0, value)

    @property
    def empowered(self) -> bool:
        return self.board.empowered

    # =========================================================================
    # GAME FLOW COMMANDS
    # =========================================================================

    def new_game(self) -> None:
        """Start from scratch: score 0, level 1, full lives."""
        self.board.reset()
        self.start_game()
        logger.info("New game started")

    def restart(self) -> None:
        """Alias for new_game()."""
        self.new_game()

    def request_start(self) -> None:
        """Start a new game unless one is already running."""
        if self.state != GameState.PLAYING:
            self.new_game()

    def start_game(self, level: Optional[int] = None) -> None:
        """
        Set up a level (the current one by default): new maze, fresh spawns,
        player at start.

        Score and lives are left alone, so this doubles as the level advance.
        If the maze cannot hold the level's spawns it is regenerated, up to
        max_maze_attempts times. Nothing changes, the level included, unless
        setup succeeds.
        """
        if level is None:
            level = self.level

        failure: Optional[SpawnFailure] = None
        for attempt in range(1, self.max_maze_attempts + 1):
            grid = generate_maze(self.rows, self.cols, self.rng)
            spawner = Spawner(grid, self.rng, self.max_spawn_attempts)
            try:
                coins = spawner.spawn_coins(level)
                power_ups = spawner.spawn_power_ups(level)
                enemies = spawner.spawn_enemies(level)
            except SpawnFailure as exc:
                failure = exc
                logger.warning(f"Maze attempt {attempt}/{self.max_maze_attempts} rejected: {exc}")
                continue

            self.grid = grid
            self.coins = coins
            self.power_ups = power_ups
            self.enemies = enemies
            break
        else:
            raise failure

        self.board.level = level
        self.player.reset()
        self.board.power_up_time = 0
        self._set_state(GameState.PLAYING)
        self._events.append(LevelStartedEvent(self.level))
        logger.info(
            f"Level {self.level} started: {len(self.coins)} coins, "
            f"{len(self.power_ups)} power-ups, {len(self.enemies)} enemies"
        )

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def advance(self) -> List[GameEvent]:
        """
        Run one frame. Returns the events that occurred, including any raised
        by commands issued since the previous frame.

        Only the start key is looked at outside PLAYING. The frame that
        starts a game publishes the HUD and does not simulate.
        """
        self.frame += 1

        if self._start_pressed() and self.state != GameState.PLAYING:
            self.new_game()
            self._publish_ui()
            return self._drain_events()

        if self.state != GameState.PLAYING:
            return self._drain_events()

        move_player(
            self.player,
            self.grid,
            left=self.input.is_key_down(KEY_MOVE_LEFT),
            right=self.input.is_key_down(KEY_MOVE_RIGHT),
            up=self.input.is_key_down(KEY_MOVE_UP),
            down=self.input.is_key_down(KEY_MOVE_DOWN),
        )
        for enemy in self.enemies:
            update_enemy(enemy, self.player, self.grid, self.rng)

        self._events.extend(resolve_collisions(
            self.player, self.coins, self.power_ups, self.enemies, self.board
        ))

        if self.board.power_up_time > 0:
            self.board.power_up_time -= 1

        if self.board.lives <= 0:
            self._set_state(GameState.GAME_OVER)
            logger.info(f"Game over on level {self.level} with score {self.score}")
        elif self.all_coins_collected():
            self.start_game(self.level + 1)

        self._publish_ui()
        return self._drain_events()

    def simulate(self, frames: int) -> List[GameEvent]:
        """
        Advance up to `frames` frames, stopping early if the game ends.
        Returns all events that occurred.
        """
        all_events: List[GameEvent] = []
        for _ in range(frames):
            all_events.extend(self.advance())
            if self.state != GameState.PLAYING:
                break
        return all_events

    def _drain_events(self) -> List[GameEvent]:
        events, self._events = self._events, []
        return events

    def _start_pressed(self) -> bool:
        """Edge-detect the start key: True once per press."""
        down = self.input.is_key_down(KEY_START)
        fired = down and not self._start_was_down
        self._start_was_down = down
        return fired

    def _set_state(self, new_state: GameState) -> None:
        if new_state == self.state:
            return
        old_state = self.state
        self.state = new_state
        self._events.append(PhaseChangedEvent(old_state, new_state))

    def _publish_ui(self) -> None:
        if self.ui_sink is None:
            return
        self.ui_sink.set_score(self.score)
        self.ui_sink.set_level(self.level)
        self.ui_sink.set_lives(self.lives)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def all_coins_collected(self) -> bool:
        return all(coin.collected for coin in self.coins)

    def coins_remaining(self) -> int:
        return sum(1 for coin in self.coins if not coin.collected)

    def render_snapshot(self) -> RenderSnapshot:
        """Plain-data copy of everything the drawing layer needs."""
        return RenderSnapshot(
            state=self.state,
            walls=list(self.grid.iter_cells(Cell.WALL)),
            rows=self.rows,
            cols=self.cols,
            player=self.player.position,
            enemies=[enemy.position for enemy in self.enemies],
            coins=[(coin.x, coin.y) for coin in self.coins if not coin.collected],
            power_ups=[(p.x, p.y) for p in self.power_ups if not p.collected],
            empowered=self.empowered,
            score=self.score,
            level=self.level,
            lives=self.lives,
        )
