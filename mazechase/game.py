"""One round of play: Pac-Man, the ghosts, the pickups, lives and score."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass

from .ghosts import HOMES, GhostPack
from .maze import Rect, collides_with_map
from .pickups import PACMAN_START, STAR_POINTS, FruitKind, Pickups
from .smart import SmartGhost

START_LIVES = 5
PACMAN_SPEED = 3.5
PEPPER_BOOST = 1.0

GHOST_HIT_COOLDOWN = 1.2
SMART_HIT_COOLDOWN = 2.0
FRUIT_COOLDOWN = 0.1

WARNING_FROM = 3.0
RESPAWN_AFTER = 6.0

PACMAN_ANIMATION_SPEED = 0.2
GHOST_ANIMATION_SPEED = 0.04
FRUIT_ANIMATION_SPEED = 0.05

GHOST_FRAMES = 61
STAR_FRAMES = 28
FRUIT_FRAMES: dict[FruitKind, int] = {
    FruitKind.APPLE: 31,
    FruitKind.MUSHROOM: 30,
    FruitKind.CHERRY: 17,
    FruitKind.PEPPER: 8,
}


class Direction(enum.Enum):
    """A way Pac-Man can be steered; handled in the order declared."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)


class GameEvent(enum.Enum):
    """Something that happened during a frame, for sounds and screens."""

    HIT = "hit"
    LOSE = "lose"
    STAR = "star"
    STARS_REFILLED = "stars_refilled"
    FRUIT = "fruit"
    GHOST_EATEN = "ghost_eaten"


@dataclass
class _Animation:
    pacman_time: float = 0.0
    ghost_time: float = 0.0
    smart_time: float = 0.0
    fruit_time: float = 0.0
    ghost_frame: int = 0
    smart_frame: int = 0


class GameState:
    """Everything on the board during play, advanced one frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.ghosts = GhostPack(rng=self.rng)
        self.smart = SmartGhost()
        self.pickups = Pickups(rng=self.rng, pacman=PACMAN_START)
        self.fruit_cooldown = 0.0
        self.reset()

    def reset(self) -> None:
        """Start a fresh round: full lives, zero score, everything back home."""
        self.pacman = PACMAN_START
        self.speed = (PACMAN_SPEED, PACMAN_SPEED)
        self.facing = Direction.RIGHT
        self.lives = START_LIVES
        self.score = 0
        self.lost = False
        self.ghost_eat_ability = False
        self.collision_time = 0.0
        self.dead_ghost: int | None = None
        self.dead_time = 0.0
        self.animation = _Animation()
        self.fruit_frames = {kind: 0 for kind in FruitKind}
        self.ghosts.reset()
        self.smart.reset()
        self.pickups.pacman = self.pacman
        self.pickups.reset()

    @property
    def mouth_open(self) -> bool:
        """Whether Pac-Man is drawn with the open-mouth picture this frame."""
        cycle = math.fmod(self.animation.pacman_time, PACMAN_ANIMATION_SPEED * 2)
        return cycle < PACMAN_ANIMATION_SPEED

    @property
    def warning_position(self) -> tuple[float, float] | None:
        """Home of the eaten ghost while its return is being announced."""
        if self.dead_ghost is None or not WARNING_FROM < self.dead_time < RESPAWN_AFTER:
            return None
        return HOMES[self.dead_ghost]

    def move_pacman(self, directions) -> Direction:
        """Move Pac-Man along each held direction unless a wall is in the way."""
        held = set(directions)
        for direction in Direction:
            if direction not in held:
                continue
            self.facing = direction
            dx, dy = direction.value
            moved = self.pacman.moved(dx * self.speed[0], dy * self.speed[1])
            if not collides_with_map(moved):
                self.pacman = moved
        return self.facing

    def give_up(self) -> GameEvent:
        """End the round at once."""
        self.lives = 0
        self.lost = True
        return GameEvent.LOSE

    def update(self, directions=(), dt: float = 0.0) -> list[GameEvent]:
        """Advance one frame of ``dt`` seconds and return what happened."""
        events: list[GameEvent] = []
        self.ghosts.step()
        self._update_smart(dt, events)
        self._animate_pickups(dt)
        self._collect_stars(events)
        self._collect_fruits(dt, events)
        self.move_pacman(directions)
        self._animate_ghosts(dt)
        self._check_ghosts(dt, events)
        self._update_dead_ghost(dt)
        return events

    def _lose(self, events: list[GameEvent]) -> None:
        events.append(GameEvent.LOSE)
        self.lives = 0
        self.lost = True

    def _update_smart(self, dt: float, events: list[GameEvent]) -> None:
        anim = self.animation
        anim.smart_time += dt
        if anim.smart_time >= GHOST_ANIMATION_SPEED:
            anim.smart_time = 0.0
            anim.smart_frame = (anim.smart_frame + 1) % GHOST_FRAMES
        touching = self.smart.step(self.pacman)
        self.collision_time += dt
        if not touching:
            return
        events.append(GameEvent.HIT)
        if self.collision_time > SMART_HIT_COOLDOWN:
            if self.lives > 1:
                self.collision_time = 0.0
                self.lives -= 1
            elif self.lives == 1:
                self._lose(events)

    def _animate_pickups(self, dt: float) -> None:
        anim = self.animation
        anim.fruit_time += dt
        if anim.fruit_time < FRUIT_ANIMATION_SPEED:
            return
        anim.fruit_time = 0.0
        for kind, count in FRUIT_FRAMES.items():
            self.fruit_frames[kind] = (self.fruit_frames[kind] + 1) % count
        for star in self.pickups.stars:
            star.frame = (star.frame + 1) % STAR_FRAMES

    def _collect_stars(self, events: list[GameEvent]) -> None:
        points = self.pickups.collect_stars(self.pacman)
        self.score += points
        events.extend([GameEvent.STAR] * (points // STAR_POINTS))
        if self.pickups.refilled:
            events.append(GameEvent.STARS_REFILLED)

    def _collect_fruits(self, dt: float, events: list[GameEvent]) -> None:
        self.fruit_cooldown += dt
        for kind in self.pickups.collect_fruits(self.pacman):
            events.append(GameEvent.FRUIT)
            if self.fruit_cooldown <= FRUIT_COOLDOWN:
                continue
            self.fruit_cooldown = 0.0
            self._apply_fruit(kind, events)

    def _apply_fruit(self, kind: FruitKind, events: list[GameEvent]) -> None:
        if kind is FruitKind.APPLE:
            self.lives += 1
        elif kind is FruitKind.PEPPER:
            self.speed = (self.speed[0] + PEPPER_BOOST, self.speed[1] + PEPPER_BOOST)
        elif kind is FruitKind.MUSHROOM:
            if self.lives > 1:
                self.lives -= 1
            else:
                self._lose(events)
        elif kind is FruitKind.CHERRY:
            self.ghost_eat_ability = True

    def _animate_ghosts(self, dt: float) -> None:
        anim = self.animation
        anim.pacman_time += dt
        anim.ghost_time += dt
        if anim.ghost_time >= GHOST_ANIMATION_SPEED:
            anim.ghost_time = 0.0
            anim.ghost_frame = (anim.ghost_frame + 1) % GHOST_FRAMES

    def _check_ghosts(self, dt: float, events: list[GameEvent]) -> None:
        self.collision_time += dt
        for index, ghost in enumerate(self.ghosts):
            if not self.pacman.collides(ghost.rect):
                continue
            events.append(GameEvent.HIT)
            if self.ghost_eat_ability:
                self.ghosts.kill(index)
                self.ghost_eat_ability = False
                self.dead_ghost = index
                self.dead_time = 0.0
                self.collision_time = 0.0
                events.append(GameEvent.GHOST_EATEN)
            elif self.collision_time > GHOST_HIT_COOLDOWN:
                self.collision_time = 0.0
                if self.lives > 1:
                    self.lives -= 1
                elif self.lives == 1:
                    self._lose(events)
                    self.ghosts.ghosts[2].stage = 1

    def _update_dead_ghost(self, dt: float) -> None:
        if self.dead_ghost is None:
            return
        self.dead_time += dt
        if self.dead_time > RESPAWN_AFTER:
            self.ghosts.respawn(self.dead_ghost)
            self.dead_ghost = None
            self.dead_time = 0.0