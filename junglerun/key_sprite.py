"""The key the player must reach; it bounces around the world."""

from __future__ import annotations

from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f


class KeySprite(Sprite):
    """A bouncing single-frame sprite that can return to its start."""

    def __init__(
        self,
        name: str,
        position: Vector2f,
        velocity: Vector2f,
        frame,
        world_width: int,
        world_height: int,
    ) -> None:
        super().__init__(name, position, velocity, frame, world_width, world_height)
        self.start_position = Vector2f(position[0], position[1])

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory) -> KeySprite:
        """Build from ``name/startLoc``, ``name/speedX|Y`` and the world size."""
        return super().from_gamedata(name, gdata, factory)

    def reset(self) -> None:
        """Go back to the starting position."""
        self.position = self.start_position.copy()