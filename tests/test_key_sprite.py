import pygame

from junglerun.frame import Frame
from junglerun.gamedata import GameData
from junglerun.key_sprite import KeySprite
from junglerun.vector2f import Vector2f


def make_frame():
    return Frame(pygame.Surface((10, 10)), pygame.Surface((50, 50)))


def make_key(pos=(100, 100), vel=(20, 30)):
    return KeySprite("key", Vector2f(*pos), Vector2f(*vel), make_frame(), 1000, 800)


def test_bounces_off_left_edge():
    key = make_key(pos=(-5, 100), vel=(-20, 0))
    key.update(16)
    assert key.velocity_x > 0


def test_bounces_off_bottom_edge():
    key = make_key(pos=(100, 795), vel=(0, 30))
    key.update(16)
    assert key.velocity_y < 0


def test_reset_returns_to_start_only():
    key = make_key()
    key.update(1000)
    assert key.position != Vector2f(100, 100)
    key.reset()
    assert key.position == Vector2f(100, 100)
    assert key.velocity == Vector2f(20, 30)


def test_from_gamedata():
    frame = make_frame()

    class Factory:
        def get_frame(self, name):
            return frame

    gdata = GameData(
        {
            "key/startLoc/x": "5",
            "key/startLoc/y": "7",
            "key/speedX": "11",
            "key/speedY": "13",
            "world/width": "1000",
            "world/height": "800",
        }
    )
    key = KeySprite.from_gamedata("key", gdata, Factory())
    assert isinstance(key, KeySprite)
    assert key.position == Vector2f(5, 7)
    assert key.velocity == Vector2f(11, 13)
    assert key.frame is frame
    key.position = Vector2f(0, 0)
    key.reset()
    assert key.position == Vector2f(5, 7)