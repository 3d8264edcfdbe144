"""A drawable image backed by a surface, blitted relative to a viewport."""

from __future__ import annotations

import pygame


class Frame:
    """An image that knows how to put itself on the screen."""

    def __init__(
        self,
        surface: pygame.Surface,
        screen: pygame.Surface,
        viewport=None,
        source_x: int = 0,
        source_y: int = 0,
    ) -> None:
        self.surface = surface
        self.screen = screen
        self.viewport = viewport
        self.source_x = int(source_x)
        self.source_y = int(source_y)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def _offset(self) -> tuple[float, float]:
        if self.viewport is None:
            return 0.0, 0.0
        return self.viewport.x, self.viewport.y

    def draw(self, x: float, y: float) -> None:
        """Blit at world position (x, y), shifted by the viewport."""
        vx, vy = self._offset()
        dest = (int(int(x) - vx), int(int(y) - vy))
        area = pygame.Rect(self.source_x, self.source_y, self.width, self.height)
        self.screen.blit(self.surface, dest, area)

    def draw_region(self, sx: float, sy: float, dx: float, dy: float) -> None:
        """Blit the frame-sized region at (sx, sy) to screen position (dx, dy)."""
        area = pygame.Rect(int(sx), int(sy), self.width, self.height)
        self.screen.blit(self.surface, (int(dx), int(dy)), area)

    def draw_rotated(self, x: float, y: float, angle: float) -> None:
        """Blit a smoothed copy rotated by ``angle`` degrees."""
        rotated = pygame.transform.rotozoom(self.surface, angle, 1)
        vx, vy = self._offset()
        dest = (int(int(x) - vx), int(int(y) - vy))
        self.screen.blit(rotated, dest)