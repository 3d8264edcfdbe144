"""A piece of an exploded sprite that flies off until it has gone far enough."""

from __future__ import annotations

import math

from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f


class Chunk(Sprite):
    """A fragment that moves against its velocity and tracks distance travelled."""

    def __init__(
        self,
        position: Vector2f,
        velocity: Vector2f,
        name: str,
        frame,
        world_width: int,
        world_height: int,
        max_distance: float,
    ) -> None:
        super().__init__(name, position, velocity, frame, world_width, world_height)
        self.distance = 0.0
        self.max_distance = float(max_distance)
        self._too_far = False

    def update(self, ticks: int) -> None:
        y_incr = self.velocity_y * float(ticks) * 0.001
        self.y = self.y - y_incr
        x_incr = self.velocity_x * float(ticks) * 0.001
        self.x = self.x - x_incr
        self.distance += math.hypot(x_incr, y_incr)
        if self.distance > self.max_distance:
            self._too_far = True

    def gone_too_far(self) -> bool:
        """Whether the chunk has travelled beyond its maximum distance."""
        return self._too_far

    def reset(self) -> None:
        self._too_far = False
        self.distance = 0.0