import os
import random
import wave
from pathlib import Path

import pygame
import pytest

from junglerun.gamedata import GameData
from junglerun.manager import GameMode, Manager, main
from junglerun.vector2f import Vector2f


def _image(path: Path, size, color) -> str:
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return str(path)


def _music(path: Path) -> str:
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 2205)
    return str(path)


def _config(root: Path) -> dict:
    font = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    green = (0, 128, 0)
    return {
        "view/width": "640",
        "view/height": "480",
        "world/width": "2000",
        "world/height": "900",
        "maxStringSize": "20",
        "font/file": font,
        "font/size": "12",
        "font/red": "255",
        "font/green": "255",
        "font/blue": "0",
        "font/unused": "0",
        "framesAreCapped": "false",
        "frameCap": "60",
        "avgFrame": "10",
        "hud/showHud": "true",
        "hud/poolHud": "false",
        "hud/hudWidth": "300",
        "hud/hudHeight": "400",
        "hud/hudStartX": "10",
        "hud/hudStartY": "10",
        "banana/file": _image(root / "banana.bmp", (10, 10), (200, 200, 0)),
        "banana/transparency": "true",
        "pineapple/file": _image(root / "pineapple.bmp", (10, 10), (200, 100, 0)),
        "pineapple/transparency": "true",
        "pineapple/speed/x": "0",
        "pineapple/speed/y": "40",
        "pineapple/scale/max": "3",
        "pineapple/scale/min": "0.5",
        "pineapple/src/x": "0",
        "pineapple/src/y": "0",
        "numberOfFruits": "5",
        "night_sky/file": _image(root / "sky.bmp", (640, 480), (0, 0, 60)),
        "night_sky/transparency": "false",
        "night_sky/factor": "4",
        "front_building/file": _image(root / "building.bmp", (640, 480), (40, 40, 40)),
        "front_building/transparency": "false",
        "front_building/factor": "2",
        "platform/file": _image(root / "platform.bmp", (640, 480), (90, 60, 30)),
        "platform/transparency": "false",
        "platform/factor": "1",
        "username": "tester",
        "screenTitle": "Jungle Run",
        "frameMax": "3",
        "health/startX": "20",
        "health/startY": "440",
        "idleTimeLimit": "100",
        "monkey/startLoc/x": "100",
        "monkey/startLoc/y": "700",
        "monkey/speedX": "200",
        "monkey/speedY": "300",
        "monkey/file": _image(root / "monkey.bmp", (160, 20), green),
        "monkey/transparency": "true",
        "monkey/frames": "8",
        "monkey/frameInterval": "50",
        "monkey/idleframe": "4",
        "monkey/chunk/size": "2",
        "monkey/chunk/distance": "100",
        "crocodile/startLoc/x": "1500",
        "crocodile/startLoc/y": "700",
        "crocodile/speedX": "50",
        "crocodile/speedY": "0",
        "crocodile/file": _image(root / "crocodile.bmp", (80, 20), (0, 90, 90)),
        "crocodile/transparency": "true",
        "crocodile/frames": "4",
        "crocodile/frameInterval": "50",
        "crocodile/attackDistance": "300",
        "crocodile/chunk/size": "2",
        "crocodile/chunk/distance": "100",
        "key/startLoc/x": "1900",
        "key/startLoc/y": "100",
        "key/speedX": "0",
        "key/speedY": "0",
        "key/file": _image(root / "key.bmp", (20, 20), (250, 220, 0)),
        "key/transparency": "true",
        "bullet/file": _image(root / "bullet.bmp", (4, 4), (10, 10, 10)),
        "bullet/transparency": "true",
        "bullet/lifetime": "500",
        "bullet/currentLife": "0",
        "bullet/loc/y": "800",
        "bullet/speed/x": "400",
        "bullet/speed/y": "50",
        "bullet/bulletCount": "4",
        "sound/music": _music(root / "music.wav"),
    }


@pytest.fixture
def manager(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    gdata = GameData(_config(tmp_path), random.Random(7))
    game = Manager(gdata)
    yield game
    game.close()


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_sprites_and_tracking(manager):
    assert [sprite.name for sprite in manager.sprites] == ["monkey", "crocodile", "key"]
    assert manager.viewport.tracked is manager.player
    assert manager.mode is GameMode.NORMAL


def test_fruits_made_every_other_count_and_sorted(manager):
    assert len(manager.fruits) == len(range(0, 5, 2))
    scales = [fruit.scale for fruit in manager.fruits]
    assert scales == sorted(scales)


def test_quit_and_escape_end_the_game(manager):
    assert manager.handle_event(pygame.event.Event(pygame.QUIT)) is True
    assert manager.handle_event(_key(pygame.K_ESCAPE)) is True
    assert manager.handle_event(_key(pygame.K_q)) is True
    assert manager.handle_event(_key(pygame.K_F1)) is False


def test_god_mode_toggles(manager):
    manager.handle_event(_key(pygame.K_g))
    assert manager.mode is GameMode.GOD
    manager.handle_event(_key(pygame.K_g))
    assert manager.mode is GameMode.NORMAL


def test_hud_toggles(manager):
    show, pool = manager.show_hud, manager.pool_hud
    manager.handle_event(_key(pygame.K_F1))
    manager.handle_event(_key(pygame.K_F2))
    assert manager.show_hud is (not show)
    assert manager.pool_hud is (not pool)


def test_walk_then_release_stops(manager):
    manager.handle_event(_key(pygame.K_a))
    assert manager.player.velocity_x == 200
    manager.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert manager.player.velocity_x == 0


def test_shoot_fires_a_bullet(manager):
    manager.handle_event(_key(pygame.K_s))
    assert manager.player.bullet_count() == 1


def test_reset_only_after_game_over(manager):
    manager.player.position = Vector2f(300, 700)
    manager.handle_event(_key(pygame.K_r))
    assert manager.player.position == Vector2f(300, 700)
    manager.show_reset_hud = True
    manager.mode = GameMode.GOD
    manager.handle_event(_key(pygame.K_r))
    assert manager.player.position == Vector2f(100, 700)
    assert manager.show_reset_hud is False
    assert manager.mode is GameMode.NORMAL


def test_switch_sprite_cycles(manager):
    tracked = []
    for _ in manager.sprites:
        manager.switch_sprite()
        tracked.append(manager.viewport.tracked)
    assert tracked == [manager.enemy, manager.key, manager.player]


def test_make_frame_writes_numbered_file(manager):
    path = manager.make_frame()
    assert path == "frames/tester.0000.bmp"
    assert Path(path).is_file()
    assert manager.frame_count == 1


def test_touching_key_ends_game(manager):
    manager.key.position = manager.player.position.copy()
    manager.update()
    assert manager.player.is_game_over() is True
    assert manager.key.x == 2000 + 200


def test_enemy_hurts_player_in_normal_mode(manager):
    manager.enemy.velocity = Vector2f(0, 0)
    manager.enemy.position = manager.player.position.copy()
    manager.health.current_length = 50
    manager.update()
    assert manager.player.is_exploding() is True
    assert manager.health.current_length == manager.health.total_length


def test_enemy_explodes_in_god_mode(manager):
    manager.mode = GameMode.GOD
    manager.enemy.velocity = Vector2f(0, 0)
    manager.enemy.position = manager.player.position.copy()
    manager.update()
    assert manager.enemy.is_exploding() is True
    assert manager.player.is_exploding() is False


def test_play_runs_one_frame_then_quits(manager):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    manager.play()
    assert manager.clock.frames == 1


def test_main_reports_missing_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "missing.xml")]) == 0
    assert capsys.readouterr().out.strip() != ""