"""A bullet that flies, drops after a while, and dies after a set distance."""

from __future__ import annotations

from junglerun.drawable import Drawable
from junglerun.vector2f import Vector2f


class Bullet(Drawable):
    """A projectile whose life is the horizontal distance it has covered."""

    def __init__(
        self,
        name: str,
        position: Vector2f,
        velocity: Vector2f,
        frame,
        lifetime: float,
        start_life: float = 0.0,
        end_y: int = 0,
    ) -> None:
        super().__init__(name, position, velocity)
        self._frame = frame
        self.lifetime = float(lifetime)
        self.start_life = float(start_life)
        self.current_life = self.start_life
        self.end_y = int(end_y)

    @property
    def frame(self):
        return self._frame

    def draw(self) -> None:
        self._frame.draw(int(self.x), int(self.y))

    def is_alive(self) -> bool:
        """Whether the bullet has not yet gone past its lifetime."""
        return self.current_life <= self.lifetime

    def update(self, ticks: int) -> None:
        """Move; stay level early in life and once at ``end_y``."""
        incr = self.velocity * float(ticks) * 0.001
        if self.current_life < self.lifetime / 4 or self.y >= self.end_y:
            incr.y = 0.0
        self.position = self.position + incr
        self.current_life += abs(incr.x)

    def reset(self, position: Vector2f, velocity: Vector2f) -> None:
        """Reuse the bullet from a new position with a new velocity."""
        self.position = Vector2f(position[0], position[1])
        self.velocity = Vector2f(velocity[0], velocity[1])
        self.current_life = self.start_life