"""The ghost that chases Pac-Man directly."""

from __future__ import annotations

from dataclasses import dataclass, field

from .maze import Rect, collides_with_map

SMART_SPEED = 2.3
SMART_START = Rect(1350, 440, 40, 40)


@dataclass
class SmartGhost:
    """A ghost that steps toward its target on both axes, stopping at walls."""

    start: Rect = SMART_START
    speed: float = SMART_SPEED
    alive: bool = True
    rect: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.rect = self.start

    def reset(self) -> None:
        """Put the ghost back at its starting place, alive."""
        self.rect = self.start
        self.alive = True

    def _try_move(self, dx: float, dy: float) -> None:
        moved = self.rect.moved(dx, dy)
        if not collides_with_map(moved):
            self.rect = moved

    def step(self, target: Rect) -> bool:
        """Move one frame toward the target; return whether it now touches it.

        Each test sees the position left by the one before, so a ghost that
        overshoots the target on an axis steps back within the same frame.
        """
        if target.x > self.rect.x:
            self._try_move(self.speed, 0)
        if target.x < self.rect.x:
            self._try_move(-self.speed, 0)
        if target.y > self.rect.y:
            self._try_move(0, self.speed)
        if target.y < self.rect.y:
            self._try_move(0, -self.speed)
        return self.rect.collides(target)