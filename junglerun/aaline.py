"""Anti-aliased thick line drawing with alpha blending onto surfaces."""

from __future__ import annotations

import math

import pygame


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value)))


def draw_pixel(surface: pygame.Surface, x: int, y: int, r: int, g: int, b: int, a: int) -> None:
    """Blend a colour into one pixel; off-surface pixels are ignored.

    Only 24- and 32-bit surfaces are drawn to.
    """
    width, height = surface.get_size()
    if x < 0 or y < 0 or x >= width or y >= height:
        return
    if surface.get_bytesize() not in (3, 4):
        return
    a = _to_byte(a)
    inverse = 255 - a
    current = surface.get_at((x, y))
    surface.set_at(
        (x, y),
        (
            r * a // 255 + current.r * inverse // 255,
            g * a // 255 + current.g * inverse // 255,
            b * a // 255 + current.b * inverse // 255,
            255,
        ),
    )


def draw_aaline(
    surface: pygame.Surface,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    thick: float,
    r: int,
    g: int,
    b: int,
    a: int,
) -> None:
    """Draw an anti-aliased line of the given thickness with end caps."""
    width, height = surface.get_size()
    thick = min(thick, math.sqrt(width * width + height * height) + 1.0)

    x0 = min(width + thick, max(-thick, x0))
    x1 = min(width + thick, max(-thick, x1))
    y0 = min(height + thick, max(-thick, y0))
    y1 = min(height + thick, max(-thick, y1))

    # Work along a major axis u with a minor axis v.
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        u0, v0, u1, v1 = y0, x0, y1, x1

        def plot(u: int, v: int, alpha: float) -> None:
            draw_pixel(surface, v, u, r, g, b, _to_byte(alpha))

    else:
        u0, v0, u1, v1 = x0, y0, x1, y1

        def plot(u: int, v: int, alpha: float) -> None:
            draw_pixel(surface, u, v, r, g, b, _to_byte(alpha))

    if u0 > u1:
        u0, v0, u1, v1 = u1, v1, u0, v0
    if u0 == u1:
        return

    du = u1 - u0
    dv = v1 - v0
    thick = thick * math.sqrt(du * du + dv * dv) / du
    delta = dv / du
    half = thick * 0.5

    def span(u: int, lower: float, upper: float, top_offset: int) -> None:
        rl = int(lower)
        ru = int(upper)
        plot(u, rl, a * (1.0 - (lower - rl)))
        plot(u, ru + top_offset, a * (upper - ru))
        for v in range(rl + 1, ru + top_offset):
            plot(u, v, a)

    main_offset = 0 if steep else 1
    lower = v0 - half
    upper = v0 + half
    u = int(u0)
    while u <= u1:
        span(u, lower, upper, main_offset)
        lower += delta
        upper += delta
        u += 1

    if v0 == v1:
        return

    if v0 < v1:
        delta_lower, delta_upper = delta, -1.0 / delta
    else:
        delta_lower, delta_upper = -1.0 / delta, delta

    lower = v1 - half + delta_lower
    upper = v1 + half + delta_upper
    u = int(u1 + 1)
    while lower < upper:
        span(u, lower, upper, 1)
        lower += delta_lower
        upper += delta_upper
        u += 1

    delta_lower, delta_upper = delta_upper, delta_lower
    lower = v0 - half - delta_lower
    upper = v0 + half - delta_upper
    u = int(u0 - 1)
    while lower < upper:
        span(u, lower, upper, 1)
        lower -= delta_lower
        upper -= delta_upper
        u -= 1


def draw_line(
    surface: pygame.Surface,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    color,
    thick: float = 1.0,
) -> None:
    """Draw an opaque line through pixel centres.

    ``color`` is a mapped surface colour (int) or anything pygame.Color takes.
    """
    if isinstance(color, int):
        rgb = surface.unmap_rgb(color)
    else:
        rgb = pygame.Color(color)
    draw_aaline(
        surface, x0 + 0.5, y0 + 0.5, x1 + 0.5, y1 + 0.5, thick, rgb.r, rgb.g, rgb.b, 0xFF
    )