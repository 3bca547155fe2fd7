"""The game window: screens, keyboard handling, sounds and drawing."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path

import pygame

from .game import Direction, GameEvent, GameState
from .maze import draw_map
from .menu import Menu, Screen
from .pickups import FruitKind
from .scores import ScoreEntry, append_score, read_scores

SCREEN_SIZE = (1500, 1050)
FPS = 60
SHOWN_SCORES = 10

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)
YELLOW = (253, 249, 0)
PLAY_BACKGROUND = (0, 5, 60)
MENU_BACKGROUND = (20, 20, 40)
SCORES_BACKGROUND = (245, 245, 245)

LOSE_BOX = (50, 350, 1400, 420)
LOSE_BORDER = 10

GHOST_COLOUR = (255, 120, 200)
SMART_COLOUR = (255, 60, 60)
STAR_COLOUR = (255, 215, 0)
FRUIT_COLOURS: dict[FruitKind, tuple[int, int, int]] = {
    FruitKind.APPLE: (60, 200, 60),
    FruitKind.MUSHROOM: (150, 90, 40),
    FruitKind.PEPPER: (255, 90, 0),
    FruitKind.CHERRY: (200, 0, 40),
}

ENTER_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER})

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_UP: Direction.UP,
}

SOUND_FILES: dict[GameEvent, str] = {
    GameEvent.HIT: "dead.mp3",
    GameEvent.LOSE: "Lose.mp3",
    GameEvent.STAR: "star.wav",
    GameEvent.STARS_REFILLED: "goal.wav",
    GameEvent.FRUIT: "mive1.mp3",
}
MENU_SOUND_FILE = "select.mp3"
MUSIC_FILE = "Theme.mp3"


class App:
    """The whole game: which screen is up, the menu, the round and the records."""

    def __init__(
        self,
        records_path: str | PathLike[str] = "records.txt",
        rng: random.Random | None = None,
        sounds: Mapping[GameEvent, object] | None = None,
        menu_sound: object | None = None,
    ) -> None:
        self.records_path = Path(records_path)
        self.menu = Menu()
        self.game = GameState(rng)
        self.screen = Screen.MENU
        self.paused = False
        self.high_scores: list[ScoreEntry] = []
        self.sounds = dict(sounds or {})
        self.menu_sound = menu_sound
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def running(self) -> bool:
        return self.screen is not Screen.EXIT

    def handle_key(self, key: int, unicode: str = "") -> Screen:
        """React to one key press and return the screen shown afterwards."""
        handler = {
            Screen.MENU: self._menu_key,
            Screen.PLAYING: self._playing_key,
            Screen.LOST: self._lost_key,
            Screen.SCORES: self._scores_key,
        }.get(self.screen)
        if handler is not None:
            handler(key, unicode)
        return self.screen

    def tick(self, pressed: Iterable[Direction] = (), dt: float = 0.0) -> list[GameEvent]:
        """Advance play by one frame with the given directions held."""
        if self.screen is not Screen.PLAYING or self.paused:
            return []
        events = self.game.update(pressed, dt)
        self._emit(events)
        if self.game.lost:
            self.screen = Screen.LOST
        return events

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current screen onto the surface."""
        painter = {
            Screen.MENU: self._draw_menu,
            Screen.PLAYING: self._draw_playing,
            Screen.LOST: self._draw_lost,
            Screen.SCORES: self._draw_scores,
        }.get(self.screen)
        if painter is not None:
            painter(surface)

    def _menu_key(self, key: int, unicode: str) -> None:
        if key == pygame.K_DOWN:
            self.menu.next()
            self._play(self.menu_sound)
        elif key == pygame.K_UP:
            self.menu.previous()
            self._play(self.menu_sound)
        elif key in ENTER_KEYS:
            target = self.menu.activate()
            if target is Screen.SCORES:
                self._load_scores()
            elif target is Screen.PLAYING:
                self.paused = False
            if target is not None:
                self.screen = target
        elif key == pygame.K_BACKSPACE:
            self.menu.backspace()
        elif len(unicode) == 1:
            self.menu.type_char(unicode)

    def _playing_key(self, key: int, unicode: str) -> None:
        if key == pygame.K_SPACE:
            self.paused = True
        elif key in ENTER_KEYS:
            self.paused = False
        elif key == pygame.K_l:
            self._emit([self.game.give_up()])
            self.screen = Screen.LOST

    def _lost_key(self, key: int, unicode: str) -> None:
        if key in ENTER_KEYS:
            append_score(self.records_path, self.menu.player, self.game.score)
            self.game.reset()
            self.paused = False
            self.screen = Screen.MENU

    def _scores_key(self, key: int, unicode: str) -> None:
        if key == pygame.K_SPACE:
            self.screen = Screen.MENU

    def _load_scores(self) -> None:
        try:
            self.high_scores = read_scores(self.records_path)
        except FileNotFoundError:
            self.high_scores = []

    @staticmethod
    def _play(sound: object | None) -> None:
        if sound is not None:
            sound.play()

    def _emit(self, events: Iterable[GameEvent]) -> None:
        for event in events:
            self._play(self.sounds.get(event))

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface: pygame.Surface, text: str, position, size: int, colour) -> None:
        surface.blit(self._font(size).render(text, True, colour), position)

    def _draw_menu(self, surface: pygame.Surface) -> None:
        surface.fill(MENU_BACKGROUND)
        self.menu.draw(surface, self._font(70), self._font(50))

    def _draw_playing(self, surface: pygame.Surface) -> None:
        game = self.game
        surface.fill(PLAY_BACKGROUND)
        draw_map(surface)
        self._text(
            surface,
            " press SPACE to stop , press ENTER to continue , press L to give up",
            (550, 45), 20, WHITE,
        )
        self._text(surface, f"Score: {game.score}", (60, 25), 50, WHITE)
        self._text(surface, str(game.lives), (1400, 30), 50, WHITE)
        pygame.draw.circle(surface, RED, (1365, 50), 12)

        for fruit in game.pickups.fruits:
            if not fruit.eaten:
                x, y = fruit.position
                pygame.draw.circle(surface, FRUIT_COLOURS[fruit.kind], (int(x) + 25, int(y) + 25), 20)
        for star in game.pickups.stars:
            if not star.eaten:
                x, y = star.position
                pygame.draw.circle(surface, STAR_COLOUR, (int(x) + 20, int(y) + 20), 14)
        if game.smart.alive:
            self._draw_ghost(surface, game.smart.rect, SMART_COLOUR)
        for ghost in game.ghosts:
            if ghost.alive:
                self._draw_ghost(surface, ghost.rect, GHOST_COLOUR)
        warning = game.warning_position
        if warning is not None:
            self._text(surface, "!", (int(warning[0]) + 12, int(warning[1])), 60, RED)
        self._draw_pacman(surface)
        if self.paused:
            self._text(surface, "PAUSED", (680, 60), 40, YELLOW)

    @staticmethod
    def _draw_ghost(surface: pygame.Surface, rect, colour) -> None:
        area = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        pygame.draw.ellipse(surface, colour, area)

    def _draw_pacman(self, surface: pygame.Surface) -> None:
        rect = self.game.pacman
        radius = rect.width / 2
        cx, cy = rect.x + radius, rect.y + rect.height / 2
        pygame.draw.circle(surface, YELLOW, (int(cx), int(cy)), int(radius))
        if self.game.mouth_open:
            dx, dy = self.game.facing.value
            angle = math.atan2(dy, dx)
            spread = math.radians(35)
            points = [(cx, cy)] + [
                (cx + radius * math.cos(angle + turn), cy + radius * math.sin(angle + turn))
                for turn in (-spread, spread)
            ]
            pygame.draw.polygon(surface, PLAY_BACKGROUND, points)

    def _draw_lost(self, surface: pygame.Surface) -> None:
        box = pygame.Rect(*LOSE_BOX)
        pygame.draw.rect(surface, BLACK, box)
        pygame.draw.rect(surface, RED, box, LOSE_BORDER)
        self._text(surface, "You Lost! Press Enter to Restart.", (90, 450), 80, RED)
        self._text(surface, f"{self.menu.player} , Your Score is : ", (210, 550), 60, RED)
        self._text(surface, str(self.game.score), (670, 640), 60, WHITE)

    def _draw_scores(self, surface: pygame.Surface) -> None:
        surface.fill(SCORES_BACKGROUND)
        self._text(surface, "High Scores", (900, 150), 40, RED)
        self._text(surface, "press space key to menu", (170, 750), 40, RED)
        for rank, entry in enumerate(self.high_scores[:SHOWN_SCORES], start=1):
            position = (900, 220 + 60 * (rank - 1))
            self._text(surface, f"{rank}. {entry.name} - {entry.score}", position, 30, RED)


def _load_sounds(resources: Path | None) -> tuple[dict[GameEvent, object], object | None]:
    if resources is None or not pygame.mixer.get_init():
        return {}, None

    def load(name: str):
        path = resources / name
        if not path.is_file():
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error:
            return None

    sounds = {event: sound for event, name in SOUND_FILES.items() if (sound := load(name)) is not None}
    return sounds, load(MENU_SOUND_FILE)


def _start_music(resources: Path | None) -> None:
    if resources is None or not pygame.mixer.get_init():
        return
    theme = resources / MUSIC_FILE
    if theme.is_file():
        try:
            pygame.mixer.music.load(str(theme))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player leaves."""
    parser = argparse.ArgumentParser(prog="mazechase", description="Chase stars through a maze.")
    parser.add_argument("--records", default="records.txt", help="file holding the high scores")
    parser.add_argument("--resources", type=Path, default=None, help="directory holding the sounds")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Maze Chase")
        sounds, menu_sound = _load_sounds(args.resources)
        _start_music(args.resources)
        app = App(args.records, sounds=sounds, menu_sound=menu_sound)
        clock = pygame.time.Clock()
        while app.running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.screen = Screen.EXIT
                elif event.type == pygame.KEYDOWN:
                    app.handle_key(event.key, event.unicode)
            if not app.running:
                break
            held = pygame.key.get_pressed()
            app.tick([direction for key, direction in KEY_DIRECTIONS.items() if held[key]], dt)
            app.draw(surface)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0