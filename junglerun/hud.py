"""Heads-up display: frame rate, time, controls and game state messages."""

from __future__ import annotations

import pygame

from junglerun.aaline import draw_aaline


class Hud:
    """A translucent panel of game information."""

    def __init__(self, io, screen: pygame.Surface, clock, width: int, height: int, start_x: int, start_y: int) -> None:
        self.io = io
        self.screen = screen
        self.clock = clock
        self.width = int(width)
        self.height = int(height)
        self.start_x = int(start_x)
        self.start_y = int(start_y)

    @classmethod
    def from_gamedata(cls, gdata, io, screen: pygame.Surface, clock) -> Hud:
        """Size and place the panel from the ``hud`` settings."""
        return cls(
            io,
            screen,
            clock,
            gdata.get_int("hud/hudWidth"),
            gdata.get_int("hud/hudHeight"),
            gdata.get_int("hud/hudStartX"),
            gdata.get_int("hud/hudStartY"),
        )

    def draw(self) -> None:
        """Draw the panel with frame rate, seconds and the controls."""
        x, y = self.start_x, self.start_y
        middle = y + self.height // 2
        draw_aaline(self.screen, x, middle, x + self.width, middle, self.height // 40, 0, 0, 0, 0x50)
        draw_aaline(self.screen, x, y, x + self.width, y, 3.0, 255, 0, 0, 0xFF)
        draw_aaline(self.screen, x, middle, x + self.width, middle, 3.0, 255, 0, 0, 0xFF)
        io = self.io
        io.print_message_value_at("Fps:", self.clock.average_frame_rate, x + 10, y + 30)
        io.print_message_value_at("Sec:", self.clock.seconds, x + 10, y + 50)
        io.print_message_at("Left: Key A", x + 10, y + 70)
        io.print_message_at("Right: Key D", x + 10, y + 90)
        io.print_message_at("Jump : Key W", x + 10, y + 110)
        io.print_message_at("Shoot : Key S", x + 10, y + 130)
        io.print_message_at("God Mode : Key G", x + 10, y + 150)

    def god_mode(self, mode) -> None:
        """Show whether god mode is on; a mode of 0 means off."""
        value = getattr(mode, "value", mode)
        text = "GOD MODE: OFF" if value == 0 else "GOD MODE: ON"
        self.io.print_message_at(text, self.start_x + 700, self.start_y + 50)

    def pool_hud(self, bullet_count: int, free_count: int) -> None:
        """Show the sizes of the bullet and free lists."""
        self.io.print_message_value_at("BulletList:", bullet_count, self.start_x + 700, self.start_y + 70)
        self.io.print_message_value_at("FreeList:", free_count, self.start_x + 700, self.start_y + 90)

    def reset_menu(self) -> None:
        """Show the game-over panel."""
        x, y = self.start_x, self.start_y
        middle = y + self.height // 2
        draw_aaline(self.screen, x + 200, middle, x + 700, middle, self.height, 0, 0, 0, 0x50)
        self.io.print_message_at("GAME OVER", x + 370, y + 150)
        self.io.print_message_at("PRESS 'r' TO RESET", x + 370, y + 200)