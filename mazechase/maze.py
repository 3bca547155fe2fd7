"""The maze walls and the rectangle collision test used by every moving thing."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

WALL_FILL = (0, 82, 172)
WALL_BORDER = (253, 249, 0)
WALL_BORDER_WIDTH = 2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


WALLS: tuple[Rect, ...] = tuple(
    Rect(*spec)
    for spec in (
        (1, 100, 1499, 40),
        (1, 1010, 1499, 40),
        (1, 140, 40, 870),
        (1460, 140, 40, 870),
        (700, 140, 80, 197),
        (850, 197, 235, 136),
        (1150, 197, 235, 136),
        (100, 197, 235, 136),
        (400, 197, 235, 136),
        (1150, 390, 235, 40),
        (100, 390, 235, 40),
        (400, 390, 40, 250),
        (1050, 390, 40, 250),
        (500, 390, 490, 40),
        (440, 485, 180, 40),
        (870, 485, 180, 40),
        (685, 430, 120, 95),
        (1150, 490, 310, 150),
        (41, 490, 300, 150),
        (500, 580, 185, 40),
        (500, 620, 40, 100),
        (800, 580, 185, 40),
        (944, 620, 40, 100),
        (540, 680, 404, 40),
        (400, 700, 40, 150),
        (1050, 700, 40, 150),
        (500, 774, 484, 40),
        (1150, 700, 310, 150),
        (41, 700, 300, 150),
        (117, 910, 484, 40),
        (900, 910, 484, 40),
        (670, 814, 150, 138),
    )
)


def collides_with_map(rect: Rect) -> bool:
    """Return True when the rectangle overlaps any wall of the maze."""
    return any(rect.collides(wall) for wall in WALLS)


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def draw_map(surface: pygame.Surface) -> None:
    """Draw every wall filled and outlined onto the surface."""
    for wall in WALLS:
        area = _to_pygame(wall)
        pygame.draw.rect(surface, WALL_FILL, area)
        pygame.draw.rect(surface, WALL_BORDER, area, WALL_BORDER_WIDTH)