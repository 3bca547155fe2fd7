"""The six wandering ghosts and the rules each of them moves by."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .maze import Rect, collides_with_map

GHOST_SPEED = 2.4
GHOST_SIZE: tuple[float, float] = (40.0, 40.0)

HOMES: tuple[tuple[float, float], ...] = (
    (600, 530),
    (1100, 150),
    (830, 440),
    (750, 530),
    (400, 650),
    (500, 150),
)

GRAVE = Rect(-100, -100, 50, 50)

PATROL_GHOST = 2
PATROL_TURN_X = 1000
_STEP_ORDER = (5, 4, 0, 1, 2, 3)


class Heading(enum.IntEnum):
    """The way a wandering ghost is currently going."""

    RIGHT = 1
    LEFT = 2
    DOWN = 3
    UP = 4

    @property
    def delta(self) -> tuple[int, int]:
        return {
            Heading.RIGHT: (1, 0),
            Heading.LEFT: (-1, 0),
            Heading.DOWN: (0, 1),
            Heading.UP: (0, -1),
        }[self]


@dataclass
class Ghost:
    """One ghost: where it lives, where it is and which way it is going."""

    home: tuple[float, float]
    size: tuple[float, float] = GHOST_SIZE
    heading: Heading = Heading.RIGHT
    stage: int = 1
    alive: bool = True
    rect: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.rect = self.spawn_rect()

    def spawn_rect(self) -> Rect:
        """The rectangle the ghost occupies at its home position."""
        return Rect(self.home[0], self.home[1], self.size[0], self.size[1])

    def _shift(self, dx: float, dy: float) -> None:
        self.rect = self.rect.moved(dx, dy)

    def _try_move(self, dx: float, dy: float) -> bool:
        """Move unless that hits a wall; return whether the move stayed."""
        self._shift(dx, dy)
        if collides_with_map(self.rect):
            self._shift(-dx, -dy)
            return False
        return True


class GhostPack:
    """All six ghosts and their movement rules."""

    def __init__(
        self,
        size: tuple[float, float] = GHOST_SIZE,
        speed: float = GHOST_SPEED,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.speed = speed
        self.rng = rng if rng is not None else random.Random()
        self.ghosts: list[Ghost] = []
        self._movers: dict[int, Callable[[Ghost], None]] = {
            0: self._step_low_wanderer,
            1: self._step_high_wanderer,
            2: self._step_patrol,
            3: self._step_shuttle,
            4: self._step_bottom_wanderer,
            5: self._step_top_wanderer,
        }
        self.reset()

    def __len__(self) -> int:
        return len(self.ghosts)

    def __iter__(self) -> Iterator[Ghost]:
        return iter(self.ghosts)

    def __getitem__(self, index: int) -> Ghost:
        return self.ghosts[index]

    def reset(self) -> None:
        """Put every ghost back home, alive, with its starting heading."""
        self.ghosts = [Ghost(home, self.size) for home in HOMES]
        self.ghosts[5].heading = Heading.LEFT

    def step(self) -> None:
        """Advance every living ghost by one frame."""
        for index in _STEP_ORDER:
            ghost = self.ghosts[index]
            if ghost.alive:
                self._movers[index](ghost)

    def kill(self, index: int) -> None:
        """Take a ghost off the board."""
        ghost = self.ghosts[index]
        ghost.alive = False
        ghost.rect = GRAVE

    def respawn(self, index: int) -> None:
        """Bring a ghost back to life at its home position."""
        ghost = self.ghosts[index]
        ghost.alive = True
        ghost.rect = ghost.spawn_rect()
        if index == PATROL_GHOST:
            ghost.stage = 1

    def _random_heading(self) -> Heading:
        return Heading(self.rng.randint(1, 4))

    def _wander(self, ghost: Ghost, turn_left_on_high_up_hit: bool = False) -> None:
        # Headings are tried in order, so a turn to a later heading is taken
        # within the same frame.
        for way in Heading:
            if ghost.heading is not way:
                continue
            dx, dy = way.delta
            if ghost._try_move(dx * self.speed, dy * self.speed):
                continue
            if turn_left_on_high_up_hit and way is Heading.UP and ghost.rect.x > 800:
                ghost.heading = Heading.LEFT
            else:
                ghost.heading = self._random_heading()

    def _step_top_wanderer(self, ghost: Ghost) -> None:
        if ghost.rect.x > 800:
            ghost.heading = Heading.LEFT
        if ghost.rect.y > 800:
            ghost.heading = Heading.UP
        self._wander(ghost)

    def _step_bottom_wanderer(self, ghost: Ghost) -> None:
        self._wander(ghost, turn_left_on_high_up_hit=True)

    def _step_low_wanderer(self, ghost: Ghost) -> None:
        if ghost.rect.y > 900:
            ghost.heading = Heading.UP
        if ghost.rect.x < 500:
            ghost.heading = Heading.RIGHT
        self._wander(ghost)

    def _step_high_wanderer(self, ghost: Ghost) -> None:
        if ghost.rect.x < 200:
            ghost.heading = Heading.RIGHT
        if ghost.rect.y > 700:
            ghost.heading = Heading.UP
        self._wander(ghost)

    def _step_patrol(self, ghost: Ghost) -> None:
        speed = self.speed
        for stage in range(1, 7):
            if ghost.stage != stage:
                continue
            if stage == 1:
                ghost._shift(speed, 0)
                if ghost.rect.x >= PATROL_TURN_X:
                    ghost.stage = 2
            elif stage == 2:
                if not ghost._try_move(0, -speed):
                    ghost.stage = 3
            elif stage == 3:
                if not ghost._try_move(speed, 0):
                    ghost.stage = 4
            elif stage == 4:
                ghost._shift(-speed, 0)
                if ghost.rect.x <= PATROL_TURN_X:
                    ghost.stage = 5
            elif stage == 5:
                if not ghost._try_move(0, speed):
                    ghost.stage = 6
            elif not ghost._try_move(-speed, 0):
                ghost.stage = 1

    def _step_shuttle(self, ghost: Ghost) -> None:
        for stage in (1, 2):
            if ghost.stage != stage:
                continue
            if stage == 1:
                if not ghost._try_move(self.speed, 0):
                    ghost.stage = 2
            elif not ghost._try_move(-self.speed, 0):
                ghost.stage = 1