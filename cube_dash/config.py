"""
Configuration management for Cube Dash.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from cube_dash.gameplay.constants import (
    MAZE_ROWS, MAZE_COLS, MIN_MAZE_SIZE, TILE_SIZE,
    MAX_SPAWN_ATTEMPTS, MAX_MAZE_ATTEMPTS,
)
from cube_dash.gameplay.spawner import can_host_enemies


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Maze
    rows: int = Field(
        default=MAZE_ROWS,
        ge=MIN_MAZE_SIZE,
        description="Maze height in cells"
    )
    cols: int = Field(
        default=MAZE_COLS,
        ge=MIN_MAZE_SIZE,
        description="Maze width in cells"
    )

    # Display
    tile_size: int = Field(
        default=TILE_SIZE,
        gt=0,
        description="Pixels per maze cell"
    )
    fps: int = Field(
        default=60,
        gt=0,
        description="Frames per second the host loop targets"
    )
    window_title: str = Field(default="Cube Dash")

    # Randomness
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the game's random source. None means unseeded"
    )

    # Spawning
    max_spawn_attempts: int = Field(
        default=MAX_SPAWN_ATTEMPTS,
        gt=0,
        description="Random draws per item before a placement gives up"
    )
    max_maze_attempts: int = Field(
        default=MAX_MAZE_ATTEMPTS,
        gt=0,
        description="Maze regenerations tolerated when placement gives up"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    @model_validator(mode="after")
    def check_room_for_enemies(self) -> "Settings":
        """Enemies spawn a minimum distance from the start, so tiny mazes cannot host a level."""
        if not can_host_enemies(self.rows, self.cols):
            raise ValueError(
                f"A {self.cols}x{self.rows} maze has no cell far enough from the start for enemies"
            )
        return self

    class Config:
        env_prefix = "CUBE_DASH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
