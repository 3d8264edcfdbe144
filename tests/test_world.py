import pygame
import pytest

from junglerun.frame import Frame
from junglerun.viewport import Viewport
from junglerun.world import World

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _setup():
    screen = pygame.Surface((200, 10))
    image = pygame.Surface((100, 10))
    image.fill(BLUE)
    image.fill(RED, pygame.Rect(0, 0, 50, 10))
    viewport = Viewport(200, 10, 10000, 10)
    return World(Frame(image, screen), 2, viewport), screen, viewport


def test_update_wraps_view():
    world, _, viewport = _setup()
    viewport.x = 250
    world.update()
    assert world.view_x == 25
    assert 0 <= world.view_x < world.frame_width


def test_update_follows_view_y():
    world, _, viewport = _setup()
    viewport.y = 3
    world.update()
    assert world.view_y == 3


def test_draw_wraps_image():
    world, screen, viewport = _setup()
    viewport.x = 250
    world.update()
    world.draw()
    assert screen.get_at((0, 0))[:3] == RED
    assert screen.get_at((30, 0))[:3] == BLUE
    assert screen.get_at((80, 0))[:3] == RED


def test_zero_factor_rejected():
    world, _, viewport = _setup()
    with pytest.raises(ValueError):
        World(world.frame, 0, viewport)