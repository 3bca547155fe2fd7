"""Stars and fruits scattered over the maze, and picking them up."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from .maze import Rect, collides_with_map

STAR_COUNT = 10
STAR_POINTS = 10
STAR_PROBE_SIZE = 40
STAR_SIZE = 50
FRUIT_PROBE_SIZE = 60
FRUIT_SIZE = 50

X_RANGE = (100, 1400)
Y_RANGE = (100, 1020)

GRAVE = Rect(-100, -100, 50, 50)
PACMAN_START = Rect(50, 145, 40, 40)


class FruitKind(enum.Enum):
    """The four fruits, in the order they are placed."""

    APPLE = "apple"
    MUSHROOM = "mushroom"
    PEPPER = "pepper"
    CHERRY = "cherry"


@dataclass
class Star:
    """A star worth points; its rect moves off the board once eaten."""

    position: tuple[float, float]
    eaten: bool = False
    frame: int = 0
    rect: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.rect = Rect(self.position[0], self.position[1], STAR_SIZE, STAR_SIZE)

    def eat(self) -> None:
        self.eaten = True
        self.rect = GRAVE


@dataclass
class Fruit:
    """A fruit with an effect; its rect moves off the board once eaten."""

    kind: FruitKind
    position: tuple[float, float]
    eaten: bool = False
    rect: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.rect = Rect(self.position[0], self.position[1], FRUIT_SIZE, FRUIT_SIZE)

    def eat(self) -> None:
        self.eaten = True
        self.rect = GRAVE


def _random_position(rng: random.Random) -> tuple[int, int]:
    return rng.randint(*X_RANGE), rng.randint(*Y_RANGE)


def generate_stars(rng: random.Random, pacman: Rect) -> list[Star]:
    """Place ten stars clear of the walls, of each other and of Pac-Man.

    Pac-Man is only checked against once at least one star is placed.
    """
    stars: list[Star] = []
    while len(stars) < STAR_COUNT:
        x, y = _random_position(rng)
        probe = Rect(x, y, STAR_PROBE_SIZE, STAR_PROBE_SIZE)
        if collides_with_map(probe):
            continue
        if any(probe.collides(star.rect) or probe.collides(pacman) for star in stars):
            continue
        stars.append(Star((x, y)))
    return stars


def generate_fruits(rng: random.Random) -> list[Fruit]:
    """Place one of each fruit clear of the walls and of each other."""
    fruits: list[Fruit] = []
    probes: list[Rect] = []
    kinds = list(FruitKind)
    while len(fruits) < len(kinds):
        x, y = _random_position(rng)
        probe = Rect(x, y, FRUIT_PROBE_SIZE, FRUIT_PROBE_SIZE)
        if collides_with_map(probe) or any(probe.collides(other) for other in probes):
            continue
        probes.append(probe)
        fruits.append(Fruit(kinds[len(fruits)], (x, y)))
    return fruits


class Pickups:
    """The stars and fruits currently on the board."""

    def __init__(self, rng: random.Random | None = None, pacman: Rect = PACMAN_START) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.pacman = pacman
        self.stars: list[Star] = []
        self.fruits: list[Fruit] = []
        self.refilled = False
        self.reset()

    @property
    def stars_left(self) -> int:
        return sum(not star.eaten for star in self.stars)

    def reset(self) -> None:
        """Scatter a fresh set of stars and fruits."""
        self.stars = generate_stars(self.rng, self.pacman)
        self.fruits = generate_fruits(self.rng)
        self.refilled = False

    def collect_stars(self, pacman: Rect) -> int:
        """Eat every star Pac-Man touches and return the points won.

        When the last star goes, a new set is scattered and ``refilled``
        is set until the next call.
        """
        self.pacman = pacman
        self.refilled = False
        points = 0
        for star in self.stars:
            if not star.eaten and star.rect.collides(pacman):
                star.eat()
                points += STAR_POINTS
        if self.stars_left == 0:
            self.stars = generate_stars(self.rng, pacman)
            self.refilled = True
        return points

    def collect_fruits(self, pacman: Rect) -> list[FruitKind]:
        """Eat every fruit Pac-Man touches and return their kinds in order."""
        eaten: list[FruitKind] = []
        for fruit in self.fruits:
            if not fruit.eaten and fruit.rect.collides(pacman):
                fruit.eat()
                eaten.append(fruit.kind)
        return eaten