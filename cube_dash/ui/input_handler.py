"""
Input Handler - Maps pygame keys to the logical keys the simulation polls.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from cube_dash.gameplay.constants import (
    KEY_MOVE_LEFT, KEY_MOVE_RIGHT, KEY_MOVE_UP, KEY_MOVE_DOWN, KEY_START,
)


# Logical key -> pygame key
KEY_BINDINGS = {
    KEY_MOVE_LEFT: pygame.K_LEFT,
    KEY_MOVE_RIGHT: pygame.K_RIGHT,
    KEY_MOVE_UP: pygame.K_UP,
    KEY_MOVE_DOWN: pygame.K_DOWN,
    KEY_START: pygame.K_SPACE,
}


class InputHandler:
    """
    Input source over the live keyboard state.

    The keyboard is sampled once per frame by poll(); is_key_down() answers
    from that sample so every query in a frame sees the same state.
    """

    def __init__(self):
        self._pressed = None

    def poll(self) -> None:
        self._pressed = pygame.key.get_pressed()

    def is_key_down(self, key: str) -> bool:
        if self._pressed is None or key not in KEY_BINDINGS:
            return False
        return bool(self._pressed[KEY_BINDINGS[key]])

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns True if the game should quit.
        """
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
        return False
