import pygame

from junglerun.bullet import Bullet
from junglerun.frame import Frame
from junglerun.gamedata import GameData
from junglerun.multibullet import MultiBullet
from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f


def opaque_frame(size=4):
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill((255, 0, 0, 255))
    return Frame(surface, pygame.Surface((50, 50)))


def make_pool(pool_size=2, lifetime=1000, start_life=0):
    frame = opaque_frame()

    def make(pos, vel):
        return Bullet("bullet", pos, vel, frame, lifetime, start_life, 500)

    return MultiBullet("bullet", Vector2f(300, 0), pool_size, make)


def test_pool_size_limits_bullets():
    pool = make_pool(pool_size=2)
    for _ in range(3):
        pool.shoot_bullet(Vector2f(0, 0), True)
    assert pool.bullet_count() == 2
    assert pool.free_count() == 0


def test_left_shot_keeps_speed_and_position():
    pool = make_pool()
    pool.shoot_bullet(Vector2f(10, 20), True)
    bullet = pool.bullets[0]
    assert bullet.position == Vector2f(10, 20)
    assert bullet.velocity == Vector2f(300, 0)


def test_right_shot_reverses_and_offsets():
    pool = make_pool()
    pool.shoot_bullet(Vector2f(200, 20), False)
    bullet = pool.bullets[0]
    assert bullet.position == Vector2f(200 - 120, 20)
    assert bullet.velocity == Vector2f(-300, 0)


def test_dead_bullets_are_recycled():
    pool = make_pool(lifetime=5, start_life=10)
    pool.shoot_bullet(Vector2f(0, 0), True)
    first = pool.bullets[0]
    pool.update(16)
    assert pool.bullet_count() == 0
    assert pool.free_count() == 1
    pool.shoot_bullet(Vector2f(3, 4), True)
    assert pool.bullets == [first]
    assert first.position == Vector2f(3, 4)
    assert pool.free_count() == 0


def test_collision_with_overlapping_target():
    pool = make_pool()
    pool.shoot_bullet(Vector2f(0, 0), True)
    near = Sprite("target", Vector2f(2, 2), Vector2f(0, 0), opaque_frame(), 1000, 1000)
    far = Sprite("target", Vector2f(100, 100), Vector2f(0, 0), opaque_frame(), 1000, 1000)
    assert pool.collided_with(near) is True
    assert pool.collided_with(far) is False


def test_no_bullets_no_collision():
    pool = make_pool()
    target = Sprite("target", Vector2f(0, 0), Vector2f(0, 0), opaque_frame(), 1000, 1000)
    assert pool.collided_with(target) is False


def test_from_gamedata_reads_settings():
    frame = opaque_frame()

    class Factory:
        def get_frame(self, name):
            return frame

    gdata = GameData(
        {
            "bullet/speed/x": "250",
            "bullet/speed/y": "30",
            "bullet/bulletCount": "3",
            "bullet/lifetime": "400",
            "bullet/currentLife": "0",
            "bullet/loc/y": "600",
        }
    )
    pool = MultiBullet.from_gamedata("bullet", gdata, Factory())
    assert pool.speed == Vector2f(250, 30)
    assert pool.pool_size == 3
    pool.shoot_bullet(Vector2f(0, 0), True)
    bullet = pool.bullets[0]
    assert bullet.lifetime == 400
    assert bullet.end_y == 600
    assert bullet.frame is frame