import pygame
import pytest

from mazechase.menu import (
    DEFAULT_PLAYER,
    LIGHT_GRAY,
    MAX_NAME_LENGTH,
    NAME_BOX,
    OPTIONS,
    Menu,
    Screen,
)


def test_defaults():
    menu = Menu()
    assert menu.selected == 0
    assert menu.player == DEFAULT_PLAYER


def test_next_wraps_to_top():
    menu = Menu()
    indices = [menu.next() for _ in OPTIONS]
    assert indices[-1] == 0
    assert menu.selected == 0


def test_previous_wraps_to_bottom():
    menu = Menu()
    assert menu.previous() == len(OPTIONS) - 1


def test_next_then_previous_round_trip():
    menu = Menu()
    menu.next()
    menu.next()
    menu.previous()
    menu.previous()
    assert menu.selected == 0


def test_type_char_appends():
    menu = Menu(player="")
    assert menu.type_char("a")
    assert menu.type_char(" ")
    assert menu.player == "a "


@pytest.mark.parametrize("char", ["\t", "~", "\u00e9"])
def test_type_char_rejects_out_of_range(char):
    menu = Menu(player="")
    assert not menu.type_char(char)
    assert menu.player == ""


def test_type_char_accepts_upper_bound():
    menu = Menu(player="")
    assert menu.type_char("}")
    assert menu.player == "}"


def test_type_char_limit():
    menu = Menu(player="")
    for _ in range(MAX_NAME_LENGTH + 3):
        menu.type_char("x")
    assert len(menu.player) == MAX_NAME_LENGTH


def test_type_char_requires_single_character():
    with pytest.raises(ValueError):
        Menu().type_char("ab")


def test_backspace():
    menu = Menu(player="ab")
    menu.backspace()
    assert menu.player == "a"
    menu.backspace()
    menu.backspace()
    assert menu.player == ""


def test_activate_targets():
    menu = Menu()
    results = []
    for _ in OPTIONS:
        results.append(menu.activate())
        menu.next()
    assert results == [Screen.PLAYING, Screen.SCORES, None, Screen.EXIT]


def test_draw_name_box():
    pygame.font.init()
    surface = pygame.Surface((1500, 1050))
    menu = Menu(player="")
    menu.draw(surface, pygame.font.Font(None, 70), pygame.font.Font(None, 30))
    x, y, w, h = NAME_BOX
    assert tuple(surface.get_at((x + w - 2, y + h - 2)))[:3] == LIGHT_GRAY