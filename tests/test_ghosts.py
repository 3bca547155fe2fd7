import random

import pytest

from mazechase.ghosts import GRAVE, HOMES, GhostPack, Heading
from mazechase.maze import collides_with_map


def make_pack(seed=7, speed=2.4):
    return GhostPack(size=(40.0, 40.0), speed=speed, rng=random.Random(seed))


def test_ghosts_start_at_their_homes_alive():
    pack = make_pack()
    assert len(pack) == 6
    assert [(g.rect.x, g.rect.y) for g in pack] == list(HOMES)
    assert all(g.alive for g in pack)
    assert pack[0].rect.x == 600 and pack[0].rect.y == 530


def test_homes_are_clear_of_walls():
    pack = make_pack()
    assert not any(collides_with_map(g.rect) for g in pack)


def test_shuttle_ghost_first_step_moves_right_by_speed():
    speed = 2.4
    pack = make_pack(speed=speed)
    pack.step()
    assert pack[3].rect.x == pytest.approx(HOMES[3][0] + speed)
    assert pack[3].rect.y == HOMES[3][1]


def test_top_wanderer_starts_heading_left():
    speed = 2.4
    pack = make_pack(speed=speed)
    assert pack[5].heading is Heading.LEFT
    pack.step()
    assert pack[5].rect.x == pytest.approx(HOMES[5][0] - speed)


def test_patrol_ghost_first_step_moves_right():
    speed = 2.4
    pack = make_pack(speed=speed)
    pack.step()
    assert pack[2].rect.x == pytest.approx(HOMES[2][0] + speed)
    assert pack[2].rect.y == HOMES[2][1]


def test_shuttle_ghost_stays_on_its_row():
    pack = make_pack()
    xs = set()
    for _ in range(1500):
        pack.step()
        xs.add(pack[3].rect.x)
        assert pack[3].rect.y == HOMES[3][1]
    assert len(xs) > 1


def test_living_ghosts_never_end_a_step_inside_a_wall():
    pack = make_pack(seed=3)
    for _ in range(3000):
        pack.step()
        for ghost in pack:
            assert not collides_with_map(ghost.rect)


def test_same_seed_gives_same_walk():
    first = make_pack(seed=11)
    second = make_pack(seed=11)
    for _ in range(500):
        first.step()
        second.step()
    assert [g.rect for g in first] == [g.rect for g in second]


def test_kill_sends_ghost_to_grave_and_it_stays_there():
    pack = make_pack()
    pack.kill(4)
    assert pack[4].alive is False
    assert pack[4].rect == GRAVE
    for _ in range(50):
        pack.step()
    assert pack[4].rect == GRAVE


def test_kill_out_of_range_raises():
    pack = make_pack()
    with pytest.raises(IndexError):
        pack.kill(6)


def test_respawn_returns_ghost_home():
    pack = make_pack()
    for _ in range(100):
        pack.step()
    pack.kill(1)
    pack.respawn(1)
    assert pack[1].alive is True
    assert pack[1].rect == pack[1].spawn_rect()
    assert (pack[1].rect.x, pack[1].rect.y) == HOMES[1]


def test_respawn_restarts_patrol_route():
    pack = make_pack()
    for _ in range(200):
        pack.step()
    assert pack[2].stage != 1
    pack.kill(2)
    pack.respawn(2)
    assert pack[2].stage == 1
    assert (pack[2].rect.x, pack[2].rect.y) == HOMES[2]


def test_reset_restores_everything():
    pack = make_pack()
    for _ in range(300):
        pack.step()
    pack.kill(0)
    pack.reset()
    assert [(g.rect.x, g.rect.y) for g in pack] == list(HOMES)
    assert all(g.alive for g in pack)
    assert pack[5].heading is Heading.LEFT


def test_low_wanderer_turns_right_when_far_left():
    speed = 2.4
    pack = make_pack(speed=speed)
    ghost = pack[0]
    ghost.rect = ghost.rect.moved(450 - ghost.rect.x, 0)
    ghost.heading = Heading.UP
    pack.step()
    assert ghost.heading is Heading.RIGHT
    assert ghost.rect.x == pytest.approx(450 + speed)