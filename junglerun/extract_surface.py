"""Cut a rectangular piece out of a surface, copying raw pixels."""

from __future__ import annotations

import pygame


def extract_surface(
    source: pygame.Surface, width: int, height: int, top_x: int, top_y: int
) -> pygame.Surface:
    """Return a new surface of ``width`` x ``height`` in the source's format.

    Pixels are copied unblended from the source starting at (top_x, top_y);
    any part of the rectangle outside the source is left zeroed.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"extract size must be positive, got {width}x{height}")
    flags = source.get_flags() & pygame.SRCALPHA
    target = pygame.Surface((width, height), flags, source)
    clip = pygame.Rect(top_x, top_y, width, height).clip(source.get_rect())
    if clip.width and clip.height:
        src = pygame.PixelArray(source)
        dst = pygame.PixelArray(target)
        try:
            dst[clip.x - top_x : clip.right - top_x, clip.y - top_y : clip.bottom - top_y] = src[
                clip.x : clip.right, clip.y : clip.bottom
            ]
        finally:
            dst.close()
            src.close()
    return target