"""The main menu: option selection and player-name entry."""

from __future__ import annotations

import enum

import pygame

OPTIONS: tuple[str, ...] = ("START", "SCORES", "RECORD", "EXIT")
DEFAULT_PLAYER = "player"
MAX_NAME_LENGTH = 49

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
LIGHT_GRAY = (200, 200, 200)

NAME_BOX = (850, 450, 300, 50)


class Screen(enum.Enum):
    """Which screen the game is showing."""

    MENU = 0
    PLAYING = 1
    LOST = 2
    SCORES = 3
    EXIT = 4


class Menu:
    """Menu state: the highlighted option and the name being typed."""

    def __init__(self, player: str = DEFAULT_PLAYER) -> None:
        self.selected = 0
        self.player = player

    @property
    def option(self) -> str:
        return OPTIONS[self.selected]

    def next(self) -> int:
        """Move the highlight down, wrapping to the top; return the new index."""
        self.selected = (self.selected + 1) % len(OPTIONS)
        return self.selected

    def previous(self) -> int:
        """Move the highlight up, wrapping to the bottom; return the new index."""
        self.selected = (self.selected - 1) % len(OPTIONS)
        return self.selected

    def type_char(self, char: str) -> bool:
        """Append a printable character to the name; return whether it was taken."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if 32 <= ord(char) <= 125 and len(self.player) < MAX_NAME_LENGTH:
            self.player += char
            return True
        return False

    def backspace(self) -> None:
        """Remove the last character of the name, if any."""
        self.player = self.player[:-1]

    def activate(self) -> Screen | None:
        """Return the screen the selected option leads to, or None if it does nothing."""
        return {
            "START": Screen.PLAYING,
            "SCORES": Screen.SCORES,
            "EXIT": Screen.EXIT,
        }.get(self.option)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        """Draw the options, the highlighted one in the larger font, and the name box."""
        for index, label in enumerate(OPTIONS):
            chosen = font if index == self.selected else small_font
            surface.blit(chosen.render(label, True, WHITE), (350, 300 + 100 * index))
        surface.blit(small_font.render("Enter your name:", True, WHITE), (860, 400))
        pygame.draw.rect(surface, LIGHT_GRAY, pygame.Rect(*NAME_BOX))
        if self.player:
            surface.blit(small_font.render(self.player, True, BLACK), (860, 460))