"""
Events emitted by the simulation for the UI to react to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from enum import Enum, auto


class GameState(Enum):
    """Current phase of the game."""
    WAITING = auto()    # Title screen, before the first start
    PLAYING = auto()    # Simulation advancing every frame
    GAME_OVER = auto()  # Lives exhausted, waiting for restart


@dataclass
class GameEvent:
    """An event that occurred during a frame."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game state changed."""
    old_state: GameState
    new_state: GameState


@dataclass
class LevelStartedEvent(GameEvent):
    """A fresh maze was generated and populated."""
    level: int


@dataclass
class CoinCollectedEvent(GameEvent):
    x: int
    y: int


@dataclass
class PowerUpCollectedEvent(GameEvent):
    x: int
    y: int


@dataclass
class EnemyDefeatedEvent(GameEvent):
    x: float
    y: float


@dataclass
class PlayerHitEvent(GameEvent):
    """Player touched an enemy while not empowered."""
    lives: int
