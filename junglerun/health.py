"""A health bar that drains while the player is being hit."""

from __future__ import annotations

import pygame

from junglerun.aaline import draw_line

RED = pygame.Color(0xFF, 0x00, 0x00)
GRAY = pygame.Color(0xCE, 0xB4, 0xB4)
BLACK = pygame.Color(0x00, 0x00, 0x00)
GREEN = pygame.Color(0x00, 0x64, 0x00)


class Health:
    """A horizontal bar with a frame; drains in steps no faster than an interval."""

    RED = RED
    GRAY = GRAY
    BLACK = BLACK
    GREEN = GREEN

    def __init__(
        self,
        screen: pygame.Surface,
        start_x: int,
        start_y: int,
        total_length: int = 200,
        current_length: int = 200,
        thick: int = 14,
        increments: int = 50,
        interval: float = 15,
    ) -> None:
        self.screen = screen
        self.start_x = start_x
        self.start_y = start_y
        self.total_length = int(total_length)
        self.current_length = int(current_length)
        self.thick = int(thick)
        self.increments = int(increments)
        self.interval = float(interval)
        self.delta_time = 0
        self.color = pygame.Color(GREEN)

    @classmethod
    def from_gamedata(cls, gdata, screen: pygame.Surface) -> Health:
        """Place the bar at ``health/startX`` and ``health/startY``."""
        return cls(screen, gdata.get_int("health/startX"), gdata.get_int("health/startY"))

    def _draw_box(self) -> None:
        x, y, length = self.start_x, self.start_y, self.total_length
        draw_line(self.screen, x, y, x + length, y, GRAY, self.thick)
        draw_line(self.screen, x, y - 8, x + length, y - 8, BLACK, 1.0)
        draw_line(self.screen, x, y + 8, x + length, y + 8, BLACK, 1.0)
        draw_line(self.screen, x - 1, y - 8, x - 1, y + 8, BLACK, 2.0)
        draw_line(self.screen, x + length + 1, y - 8, x + length + 1, y + 8, BLACK, 2.0)

    def draw(self) -> None:
        """Draw the frame and the remaining health."""
        self._draw_box()
        x, y = self.start_x, self.start_y
        draw_line(self.screen, x, y, x + self.current_length, y, self.color, self.thick)

    def update(self, ticks: int) -> None:
        """Drain one step once more than ``interval`` has passed; turn red near empty."""
        self.delta_time += ticks
        if self.current_length > 0 and self.delta_time > self.interval:
            self.delta_time = 0
            self.current_length -= self.increments
        if self.current_length - self.increments <= 0:
            self.color = pygame.Color(RED)

    def reset(self) -> None:
        """Refill the bar."""
        self.color = pygame.Color(GREEN)
        self.current_length = self.total_length

    def is_health_zero(self) -> bool:
        """Whether the bar is empty."""
        return self.current_length <= 0