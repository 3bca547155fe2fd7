import random
from itertools import combinations

import pytest

from mazechase.maze import Rect, collides_with_map
from mazechase.pickups import (
    FRUIT_PROBE_SIZE,
    GRAVE,
    STAR_COUNT,
    STAR_POINTS,
    STAR_PROBE_SIZE,
    X_RANGE,
    Y_RANGE,
    FruitKind,
    Pickups,
    generate_fruits,
    generate_stars,
)

PACMAN = Rect(50, 145, 40, 40)


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_stars_are_placed_clear(seed):
    stars = generate_stars(random.Random(seed), PACMAN)
    assert len(stars) == STAR_COUNT
    for index, star in enumerate(stars):
        x, y = star.position
        assert X_RANGE[0] <= x <= X_RANGE[1]
        assert Y_RANGE[0] <= y <= Y_RANGE[1]
        probe = Rect(x, y, STAR_PROBE_SIZE, STAR_PROBE_SIZE)
        assert not collides_with_map(probe)
        assert not any(probe.collides(earlier.rect) for earlier in stars[:index])
        assert star.eaten is False


def test_stars_are_deterministic_for_a_seed():
    first = generate_stars(random.Random(3), PACMAN)
    second = generate_stars(random.Random(3), PACMAN)
    assert [s.position for s in first] == [s.position for s in second]


@pytest.mark.parametrize("seed", [0, 5, 99])
def test_fruits_are_placed_clear(seed):
    fruits = generate_fruits(random.Random(seed))
    assert [f.kind for f in fruits] == [
        FruitKind.APPLE,
        FruitKind.MUSHROOM,
        FruitKind.PEPPER,
        FruitKind.CHERRY,
    ]
    probes = [Rect(*f.position, FRUIT_PROBE_SIZE, FRUIT_PROBE_SIZE) for f in fruits]
    for probe in probes:
        assert not collides_with_map(probe)
    for a, b in combinations(probes, 2):
        assert not a.collides(b)


def test_collect_star_gives_points():
    pickups = Pickups(random.Random(11))
    star = pickups.stars[0]
    pacman = Rect(star.position[0], star.position[1], 1, 1)
    points = pickups.collect_stars(pacman)
    eaten = sum(s.eaten for s in pickups.stars)
    assert star.eaten is True
    assert star.rect == GRAVE
    assert points == STAR_POINTS * eaten
    assert pickups.stars_left == STAR_COUNT - eaten


def test_collect_stars_nothing_when_away():
    pickups = Pickups(random.Random(2))
    assert pickups.collect_stars(GRAVE.moved(-1000, -1000)) == 0
    assert pickups.stars_left == STAR_COUNT
    assert pickups.refilled is False


def test_eating_all_stars_refills():
    pickups = Pickups(random.Random(8))
    total = 0
    for star in list(pickups.stars):
        if not star.eaten:
            total += pickups.collect_stars(Rect(star.position[0], star.position[1], 1, 1))
    assert total == STAR_POINTS * STAR_COUNT
    assert pickups.refilled is True
    assert pickups.stars_left == STAR_COUNT


def test_collect_fruit_returns_kind_once():
    pickups = Pickups(random.Random(4))
    fruit = pickups.fruits[2]
    pacman = Rect(fruit.position[0], fruit.position[1], 10, 10)
    assert pickups.collect_fruits(pacman) == [FruitKind.PEPPER]
    assert fruit.eaten is True
    assert fruit.rect == GRAVE
    assert pickups.collect_fruits(pacman) == []


def test_reset_restores_everything():
    pickups = Pickups(random.Random(6))
    for fruit in pickups.fruits:
        pickups.collect_fruits(Rect(fruit.position[0], fruit.position[1], 10, 10))
    assert all(f.eaten for f in pickups.fruits)
    pickups.reset()
    assert not any(f.eaten for f in pickups.fruits)
    assert pickups.stars_left == STAR_COUNT