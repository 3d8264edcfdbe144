"""A falling sprite drawn at a random scale."""

from __future__ import annotations

import pygame

from junglerun.collision import PerPixelCollisionStrategy, RectangularCollisionStrategy
from junglerun.drawable import Drawable
from junglerun.frame import Frame
from junglerun.vector2f import Vector2f


def _rand_below(gdata, limit: int) -> int:
    return int(gdata.rand_in_range(0, limit))


class ScaledSprite(Drawable):
    """A sprite scaled by a random whole multiple of a minimum scale."""

    def __init__(self, name: str, surface: pygame.Surface, gdata, screen: pygame.Surface, viewport=None) -> None:
        world_width = gdata.get_int("world/width")
        world_height = gdata.get_int("world/height")
        if world_width <= 0 or world_height <= 0:
            raise ValueError("world size must be positive")
        scale_max = gdata.get_int(name + "/scale/max")
        if scale_max <= 0:
            raise ValueError(f"{name}/scale/max must be positive, got {scale_max}")

        position = Vector2f(_rand_below(gdata, world_width), -_rand_below(gdata, world_height))
        velocity = Vector2f(gdata.get_int(name + "/speed/x"), gdata.get_int(name + "/speed/y"))
        super().__init__(name, position, velocity)

        self._gdata = gdata
        self._scale = (_rand_below(gdata, scale_max) + 1) * gdata.get_float(name + "/scale/min")
        scaled = pygame.transform.rotozoom(surface, 0, self._scale)
        self._frame = Frame(
            scaled,
            screen,
            viewport,
            gdata.get_int(name + "/src/x"),
            gdata.get_int(name + "/src/y"),
        )
        self.frame_width = self._frame.width
        self.frame_height = self._frame.height
        self.world_width = world_width
        self.world_height = world_height
        self.velocity_y = self.velocity_y * self._scale
        self._rectangular = RectangularCollisionStrategy()
        self._per_pixel = PerPixelCollisionStrategy(viewport)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def center(self) -> Vector2f:
        """Centre of the frame in world coordinates."""
        return Vector2f(self.x + self._frame.width // 2, self.y + self._frame.height // 2)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ScaledSprite):
            return NotImplemented
        return self._scale < other._scale

    def draw(self) -> None:
        self._frame.draw(int(self.x), int(self.y))

    def update(self, ticks: int) -> None:
        """Fall; on reaching the bottom reappear at the top at a random x."""
        self.position = self.position + self.velocity * float(ticks) * 0.001
        if self.y < 0:
            self.velocity_y = abs(self.velocity_y)
        if self.y > self.world_height - self.frame_height:
            self.position = Vector2f(_rand_below(self._gdata, self.world_width), 0.0)
            self.velocity_y = -abs(self.velocity_y)
        if self.x < 0:
            self.velocity_x = abs(self.velocity_x)
        if self.x > self.world_width - self.frame_width:
            self.velocity_x = -abs(self.velocity_x)

    def pixel_at(self, i: int, j: int) -> int:
        """Mapped pixel value under world point (i, j)."""
        width, height = self._frame.width, self._frame.height
        index = (j - int(self.y)) * width + (i - int(self.x))
        if not 0 <= index < width * height:
            raise IndexError(f"point ({i}, {j}) is outside {self.name}")
        return self._frame.surface.get_at_mapped((index % width, index // width))

    def collided_with(self, obj) -> bool:
        """Only sprites scaled above 1 can collide, tested pixel by pixel."""
        if self._scale <= 1:
            return False
        if self._rectangular.execute(self, obj):
            return self._per_pixel.execute(self, obj)
        return False