"""Camera window onto the world that follows a tracked object."""

from __future__ import annotations

from typing import Any

from junglerun.vector2f import Vector2f


class Viewport:
    """The visible part of the world, centred on a tracked object."""

    def __init__(self, view_width: int, view_height: int, world_width: int, world_height: int) -> None:
        self.view_width = int(view_width)
        self.view_height = int(view_height)
        self.world_width = int(world_width)
        self.world_height = int(world_height)
        self._position = Vector2f(0, 0)
        self._tracked: Any = None
        self._obj_width = 0
        self._obj_height = 0

    @classmethod
    def from_gamedata(cls, gdata) -> Viewport:
        """Build a viewport from the ``view`` and ``world`` settings."""
        return cls(
            gdata.get_int("view/width"),
            gdata.get_int("view/height"),
            gdata.get_int("world/width"),
            gdata.get_int("world/height"),
        )

    @property
    def tracked(self) -> Any:
        """The object being followed, or None."""
        return self._tracked

    def track(self, obj: Any) -> None:
        """Follow ``obj``; its frame size is taken now."""
        self._tracked = obj
        self._obj_width = int(obj.frame.width)
        self._obj_height = int(obj.frame.height)

    def update(self) -> None:
        """Centre on the tracked object, keeping inside the world."""
        obj = self._tracked
        if obj is None:
            raise RuntimeError("Viewport has no object to track")
        x = (obj.x + self._obj_width // 2) - self.view_width // 2
        y = (obj.y + self._obj_height // 2) - self.view_height // 2
        x = max(0.0, x)
        y = max(0.0, y)
        x_limit = self.world_width - self.view_width
        y_limit = self.world_height - self.view_height
        if x_limit >= 0 and x > x_limit:
            x = x_limit
        if y_limit >= 0 and y > y_limit:
            y = y_limit
        self._position = Vector2f(x, y)

    def draw(self, io) -> None:
        """Show which object is being tracked."""
        if self._tracked is None:
            raise RuntimeError("Viewport has no object to track")
        io.print_message_centered_at("Tracking " + self._tracked.name, 30)

    @property
    def position(self) -> Vector2f:
        """A copy of the top-left corner in world coordinates."""
        return self._position.copy()

    @property
    def x(self) -> float:
        return self._position.x

    @x.setter
    def x(self, value: float) -> None:
        self._position.x = float(value)

    @property
    def y(self) -> float:
        return self._position.y

    @y.setter
    def y(self, value: float) -> None:
        self._position.y = float(value)