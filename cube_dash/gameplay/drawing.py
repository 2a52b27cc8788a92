"""
Render snapshot and the ordered draw commands built from it.
NO UI DEPENDENCIES.

Later commands paint over earlier ones, so the order here is the layering:
maze, coins, power-ups, enemies, player, overlay.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .constants import (
    TILE_SIZE, PLAYER_SIZE, PLAYER_OFFSET, ENEMY_SIZE, ENEMY_OFFSET,
    COIN_SIZE, COIN_OFFSET, POWER_UP_SIZE, POWER_UP_OFFSET,
    COLOR_WALL, COLOR_COIN, COLOR_POWER_UP, COLOR_ENEMY, COLOR_ENEMY_FRIGHTENED,
    COLOR_PLAYER, COLOR_PLAYER_EMPOWERED, COLOR_OVERLAY, COLOR_TEXT,
    TITLE_FONT_SIZE, SUBTITLE_FONT_SIZE, SUBTITLE_GAP,
)
from .events import GameState

Color = Tuple[int, ...]

# (title, subtitle) for the screens that get an overlay
OVERLAY_TEXT = {
    GameState.WAITING: ("CUBE DASH", "Press SPACE to start"),
    GameState.GAME_OVER: ("GAME OVER", "Press SPACE to restart"),
}


@dataclass
class RenderSnapshot:
    """Everything the drawing layer needs for one frame, as plain data."""
    state: GameState
    rows: int
    cols: int
    walls: List[Tuple[int, int]] = field(default_factory=list)
    player: Tuple[float, float] = (1.0, 1.0)
    enemies: List[Tuple[float, float]] = field(default_factory=list)
    coins: List[Tuple[int, int]] = field(default_factory=list)
    power_ups: List[Tuple[int, int]] = field(default_factory=list)
    empowered: bool = False
    score: int = 0
    level: int = 1
    lives: int = 0


@dataclass
class ClearSurface:
    pass


@dataclass
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass
class DrawText:
    text: str
    x: float
    y: float
    font_size: int
    color: Color
    align: str = "center"


DrawCommand = Union[ClearSurface, FillRect, DrawText]


def surface_size(rows: int, cols: int, tile_size: int = TILE_SIZE) -> Tuple[int, int]:
    """(width, height) in pixels of the whole playfield."""
    return cols * tile_size, rows * tile_size


def _tile_rect(x: float, y: float, offset: int, size: int, color: Color, tile_size: int) -> FillRect:
    return FillRect(x * tile_size + offset, y * tile_size + offset, size, size, color)


def build_draw_commands(snapshot: RenderSnapshot, tile_size: int = TILE_SIZE) -> List[DrawCommand]:
    """Translate a snapshot into pixel-space draw commands, back to front."""
    width, height = surface_size(snapshot.rows, snapshot.cols, tile_size)
    commands: List[DrawCommand] = [ClearSurface()]

    for x, y in snapshot.walls:
        commands.append(FillRect(x * tile_size, y * tile_size, tile_size, tile_size, COLOR_WALL))

    for x, y in snapshot.coins:
        commands.append(_tile_rect(x, y, COIN_OFFSET, COIN_SIZE, COLOR_COIN, tile_size))

    for x, y in snapshot.power_ups:
        commands.append(_tile_rect(x, y, POWER_UP_OFFSET, POWER_UP_SIZE, COLOR_POWER_UP, tile_size))

    enemy_color = COLOR_ENEMY_FRIGHTENED if snapshot.empowered else COLOR_ENEMY
    for x, y in snapshot.enemies:
        commands.append(_tile_rect(x, y, ENEMY_OFFSET, ENEMY_SIZE, enemy_color, tile_size))

    player_color = COLOR_PLAYER_EMPOWERED if snapshot.empowered else COLOR_PLAYER
    px, py = snapshot.player
    commands.append(_tile_rect(px, py, PLAYER_OFFSET, PLAYER_SIZE, player_color, tile_size))

    if snapshot.state in OVERLAY_TEXT:
        title, subtitle = OVERLAY_TEXT[snapshot.state]
        commands.append(FillRect(0, 0, width, height, COLOR_OVERLAY))
        commands.append(DrawText(title, width / 2, height / 2, TITLE_FONT_SIZE, COLOR_TEXT))
        commands.append(DrawText(subtitle, width / 2, height / 2 + SUBTITLE_GAP, SUBTITLE_FONT_SIZE, COLOR_TEXT))

    return commands
