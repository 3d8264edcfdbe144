"""A sprite animated by cycling through a strip of frames."""

from __future__ import annotations

from collections.abc import Sequence

from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f


class MultiSprite(Sprite):
    """A bouncing sprite whose frame advances after each frame interval."""

    def __init__(
        self,
        name: str,
        position: Vector2f,
        velocity: Vector2f,
        frames: Sequence,
        world_width: int,
        world_height: int,
        frame_interval: int,
    ) -> None:
        if not frames:
            raise ValueError(f"{name} needs at least one frame")
        self.frames = tuple(frames)
        self.current_frame = 0
        self.number_of_frames = len(self.frames)
        self.frame_interval = frame_interval
        self.time_since_last_frame = 0.0
        super().__init__(name, position, velocity, self.frames[0], world_width, world_height)

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory) -> MultiSprite:
        """Build from ``name/startLoc``, ``name/speedX|Y`` and ``name/frameInterval``."""
        return cls(
            name,
            Vector2f(gdata.get_int(name + "/startLoc/x"), gdata.get_int(name + "/startLoc/y")),
            Vector2f(gdata.get_int(name + "/speedX"), gdata.get_int(name + "/speedY")),
            factory.get_frames(name),
            gdata.get_int("world/width"),
            gdata.get_int("world/height"),
            gdata.get_int(name + "/frameInterval"),
        )

    @property
    def frame(self):
        return self.frames[self.current_frame]

    def advance_frame(self, ticks: int) -> None:
        """Step through the first half of the strip once the interval has passed."""
        self.time_since_last_frame += ticks
        if self.time_since_last_frame > self.frame_interval:
            half = max(1, self.number_of_frames // 2)
            self.current_frame = (self.current_frame + 1) % half
            self.time_since_last_frame = 0.0

    def draw(self) -> None:
        self.frame.draw(int(self.x), int(self.y))

    def update(self, ticks: int) -> None:
        self.advance_frame(ticks)
        self._move(ticks)
        self._bounce()