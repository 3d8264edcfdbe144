"""A pool of bullets that recycles spent ones."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from junglerun.bullet import Bullet
from junglerun.collision import PerPixelCollisionStrategy, RectangularCollisionStrategy
from junglerun.vector2f import Vector2f

_RIGHT_OFFSET = 120


class MultiBullet:
    """Live bullets plus a free list of spent ones ready for reuse."""

    def __init__(
        self,
        name: str,
        speed: Vector2f,
        pool_size: int,
        make_bullet: Callable[[Vector2f, Vector2f], Bullet],
    ) -> None:
        self.name = name
        self.speed = Vector2f(speed[0], speed[1])
        self.pool_size = int(pool_size)
        self._make_bullet = make_bullet
        self.bullets: list[Bullet] = []
        self.free_list: deque[Bullet] = deque()
        self._rectangular = RectangularCollisionStrategy()
        self._per_pixel = PerPixelCollisionStrategy()

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory) -> MultiBullet:
        """Build from ``name/speed``, ``name/bulletCount`` and the bullet settings."""
        frame = factory.get_frame(name)
        lifetime = gdata.get_int("bullet/lifetime")
        start_life = gdata.get_int("bullet/currentLife")
        end_y = gdata.get_int(name + "/loc/y")

        def make_bullet(position: Vector2f, velocity: Vector2f) -> Bullet:
            return Bullet(name, position, velocity, frame, lifetime, start_life, end_y)

        return cls(
            name,
            Vector2f(gdata.get_int(name + "/speed/x"), gdata.get_int(name + "/speed/y")),
            gdata.get_int(name + "/bulletCount"),
            make_bullet,
        )

    def draw(self) -> None:
        for bullet in self.bullets:
            bullet.draw()

    def update(self, ticks: int) -> None:
        """Move live bullets and move dead ones to the free list."""
        alive = []
        for bullet in self.bullets:
            if bullet.is_alive():
                bullet.update(ticks)
                alive.append(bullet)
            else:
                self.free_list.append(bullet)
        self.bullets = alive

    def shoot_bullet(self, position: Vector2f, is_left: bool) -> None:
        """Fire from ``position``; a free bullet is reused before a new one is made."""
        velocity = self.speed.copy()
        start = Vector2f(position[0], position[1])
        if not is_left:
            velocity.x = -velocity.x
            start = start - Vector2f(_RIGHT_OFFSET, 0)
        if self.free_list:
            bullet = self.free_list.popleft()
            bullet.reset(start, velocity)
            self.bullets.append(bullet)
        elif len(self.bullets) < self.pool_size:
            self.bullets.append(self._make_bullet(start, velocity))

    def collided_with(self, obj) -> bool:
        """Per-pixel test against the first bullet whose rectangle touches ``obj``."""
        for bullet in self.bullets:
            if self._rectangular.execute(bullet, obj):
                return self._per_pixel.execute(bullet, obj)
        return False

    def bullet_count(self) -> int:
        """Bullets in flight."""
        return len(self.bullets)

    def free_count(self) -> int:
        """Spent bullets waiting for reuse."""
        return len(self.free_list)