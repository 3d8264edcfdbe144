"""A horizontally wrapping background layer scrolled at a fraction of the view."""

from __future__ import annotations


class World:
    """A background image that scrolls ``factor`` times slower than the viewport."""

    def __init__(self, frame, factor: int, viewport) -> None:
        if factor == 0:
            raise ValueError("scroll factor must not be zero")
        self.frame = frame
        self.factor = factor
        self.frame_width = frame.width
        self.viewport = viewport
        self.view_x = 0.0
        self.view_y = 0.0

    def update(self) -> None:
        """Follow the viewport, wrapping across the image width."""
        self.view_x = float(int(self.viewport.x / self.factor) % self.frame_width)
        self.view_y = self.viewport.y

    def draw(self) -> None:
        """Draw the layer and the wrapped-around part after it."""
        self.frame.draw_region(self.view_x, self.view_y, 0, 0)
        self.frame.draw_region(0, self.view_y, self.frame_width - self.view_x, 0)