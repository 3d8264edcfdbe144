"""A single-frame sprite that moves and bounces off the world edges."""

from __future__ import annotations

import math

from junglerun.drawable import Drawable
from junglerun.vector2f import Vector2f


class Sprite(Drawable):
    """A moving object drawn with one frame, kept inside the world."""

    def __init__(
        self,
        name: str,
        position: Vector2f,
        velocity: Vector2f,
        frame,
        world_width: int,
        world_height: int,
    ) -> None:
        super().__init__(name, position, velocity)
        self._frame = frame
        self.frame_width = frame.width
        self.frame_height = frame.height
        self.world_width = int(world_width)
        self.world_height = int(world_height)

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory) -> Sprite:
        """Build from ``name/startLoc``, ``name/speedX|Y`` and the world size."""
        return cls(
            name,
            Vector2f(gdata.get_int(name + "/startLoc/x"), gdata.get_int(name + "/startLoc/y")),
            Vector2f(gdata.get_int(name + "/speedX"), gdata.get_int(name + "/speedY")),
            factory.get_frame(name),
            gdata.get_int("world/width"),
            gdata.get_int("world/height"),
        )

    @property
    def frame(self):
        return self._frame

    def draw(self) -> None:
        self._frame.draw(int(self.x), int(self.y))

    def distance_to(self, other: Drawable) -> int:
        """Whole-pixel distance between the two top-left corners."""
        return int(math.hypot(self.x - other.x, self.y - other.y))

    def _move(self, ticks: int) -> None:
        self.position = self.position + self.velocity * float(ticks) * 0.001

    def _bounce(self) -> None:
        if self.y < 0:
            self.velocity_y = abs(self.velocity_y)
        if self.y > self.world_height - self.frame_height:
            self.velocity_y = -abs(self.velocity_y)
        if self.x < 0:
            self.velocity_x = abs(self.velocity_x)
        if self.x > self.world_width - self.frame_width:
            self.velocity_x = -abs(self.velocity_x)

    def update(self, ticks: int) -> None:
        self._move(ticks)
        self._bounce()