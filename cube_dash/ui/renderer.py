"""
Renderer - Executes draw commands on a pygame surface.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict, Iterable, Tuple

import pygame

from cube_dash.gameplay.drawing import ClearSurface, DrawCommand, DrawText, FillRect


BACKGROUND = (0, 0, 0)
FONT_NAME = "arial"


class Renderer:
    """
    Paints draw commands onto a surface, in order.

    This class never reads or modifies the simulation.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    def draw(self, commands: Iterable[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, ClearSurface):
                self.surface.fill(BACKGROUND)
            elif isinstance(command, FillRect):
                self._fill_rect(command)
            elif isinstance(command, DrawText):
                self._draw_text(command)

    def _fill_rect(self, command: FillRect) -> None:
        rect = pygame.Rect(
            round(command.x), round(command.y),
            round(command.width), round(command.height)
        )
        if len(command.color) == 4 and command.color[3] < 255:
            # Translucent fills need their own alpha surface
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(command.color)
            self.surface.blit(overlay, rect.topleft)
        else:
            pygame.draw.rect(self.surface, command.color[:3], rect)

    def _draw_text(self, command: DrawText) -> None:
        font = self._font(command.font_size)
        text = font.render(command.text, True, command.color)
        rect = text.get_rect()
        anchor = (round(command.x), round(command.y))
        if command.align == "center":
            rect.midbottom = anchor
        elif command.align == "right":
            rect.bottomright = anchor
        else:
            rect.bottomleft = anchor
        self.surface.blit(text, rect)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(FONT_NAME, size)
        return self._fonts[size]


class CaptionHud:
    """
    UI sink that shows score, level and lives in the window caption.
    Only touches the display when a value changes.
    """

    def __init__(self, title: str):
        self.title = title
        self.score = 0
        self.level = 1
        self.lives = 0
        self._shown: Tuple[int, int, int] = (-1, -1, -1)

    def set_score(self, score: int) -> None:
        self.score = score
        self._refresh()

    def set_level(self, level: int) -> None:
        self.level = level
        self._refresh()

    def set_lives(self, lives: int) -> None:
        self.lives = lives
        self._refresh()

    def caption(self) -> str:
        return f"{self.title} - Score: {self.score}  Level: {self.level}  Lives: {self.lives}"

    def _refresh(self) -> None:
        current = (self.score, self.level, self.lives)
        if current == self._shown:
            return
        self._shown = current
        pygame.display.set_caption(self.caption())
