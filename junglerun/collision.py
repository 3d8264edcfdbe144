"""Ways of deciding whether two drawables touch."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import pygame

_MESSAGE_X = 320
_MESSAGE_Y = 30


class CollisionStrategy(ABC):
    """Decides whether two drawables collide."""

    @abstractmethod
    def execute(self, obj1, obj2) -> bool:
        """True when the two objects collide."""

    @abstractmethod
    def draw(self, io) -> None:
        """Show the strategy's name on screen."""


class RectangularCollisionStrategy(CollisionStrategy):
    """Collision when the frame rectangles overlap or touch."""

    def execute(self, obj1, obj2) -> bool:
        left1 = obj1.x
        left2 = obj2.x
        right1 = left1 + obj1.frame.width
        right2 = left2 + obj2.frame.width
        if right1 < left2 or left1 > right2:
            return False
        top1 = obj1.y
        top2 = obj2.y
        bottom1 = top1 + obj1.frame.height
        bottom2 = top2 + obj2.frame.height
        if bottom1 < top2 or bottom2 < top1:
            return False
        return True

    def draw(self, io) -> None:
        io.print_message_at("Strategy: Rectangular Collision", _MESSAGE_X, _MESSAGE_Y)


class MidPointCollisionStrategy(CollisionStrategy):
    """Collision when the centres are closer than the sum of half-widths."""

    def distance(self, x1: float, y1: float, x2: float, y2: float) -> float:
        return math.hypot(x1 - x2, y1 - y2)

    def execute(self, obj1, obj2) -> bool:
        w1, h1 = obj1.frame.width, obj1.frame.height
        w2, h2 = obj2.frame.width, obj2.frame.height
        limit = w1 // 2 + w2 // 2
        return (
            self.distance(obj1.x + w1 // 2, obj1.y + h1 // 2, obj2.x + w2 // 2, obj2.y + h2 // 2)
            < limit
        )

    def draw(self, io) -> None:
        io.print_message_at("Strategy: Distance from Middle", _MESSAGE_X, _MESSAGE_Y)


def _is_visible(pixel: int, surface: pygame.Surface) -> bool:
    if surface.get_bitsize() == 32:
        amask = surface.get_masks()[3]
        ashift = surface.get_shifts()[3]
        aloss = surface.get_losses()[3]
        if ((pixel & amask) >> ashift) << aloss == 0:
            return False
    colorkey = surface.get_colorkey()
    key = surface.map_rgb(colorkey) if colorkey is not None else 0
    return pixel != key


def _pixel(surface: pygame.Surface, width: int, i: int, j: int) -> int | None:
    index = j * width + i
    w, h = surface.get_size()
    if index < 0 or index >= w * h:
        return None
    return surface.get_at_mapped((index % w, index // w))


class PerPixelCollisionStrategy(CollisionStrategy):
    """Collision when a visible pixel of one frame lies on a visible pixel of the other."""

    def __init__(self, viewport=None) -> None:
        self.viewport = viewport

    def execute(self, obj1, obj2) -> bool:
        if not RectangularCollisionStrategy().execute(obj1, obj2):
            return False

        p1 = obj1.position
        p2 = obj2.position
        if self.viewport is not None:
            offset = self.viewport.position
            p1 = p1 - offset
            p2 = p2 - offset

        frame1, frame2 = obj1.frame, obj2.frame
        width1, height1 = frame1.width, frame1.height
        width2, height2 = frame2.width, frame2.height

        o1_left, o1_up = int(p1.x), int(p1.y)
        o2_left, o2_up = int(p2.x), int(p2.y)
        sides = sorted((o1_left, o1_left + width1, o2_left, o2_left + width2))
        lids = sorted((o1_up, o1_up + height1, o2_up, o2_up + height2))

        surface1, surface2 = frame1.surface, frame2.surface
        for x in range(sides[1], sides[2]):
            for y in range(lids[1], lids[2]):
                pixel1 = _pixel(surface1, width1, int(x - p1.x), int(y - p1.y))
                pixel2 = _pixel(surface2, width2, int(x - p2.x), int(y - p2.y))
                if pixel1 is None or pixel2 is None:
                    continue
                if _is_visible(pixel1, surface1) and _is_visible(pixel2, surface2):
                    return True
        return False

    def draw(self, io) -> None:
        io.print_message_at("Strategy: Per-Pixel Collision", _MESSAGE_X, _MESSAGE_Y)