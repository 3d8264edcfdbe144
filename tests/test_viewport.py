from types import SimpleNamespace

import pytest

from junglerun.gamedata import GameData
from junglerun.vector2f import Vector2f
from junglerun.viewport import Viewport


def _obj(x, y, width=20, height=40, name="monkey"):
    return SimpleNamespace(x=x, y=y, name=name, frame=SimpleNamespace(width=width, height=height))


class _RecordingIO:
    def __init__(self):
        self.calls = []

    def print_message_centered_at(self, msg, y):
        self.calls.append((msg, y))


def test_from_gamedata_reads_sizes():
    gdata = GameData({"view/width": "640", "view/height": "480", "world/width": "2000", "world/height": "900"})
    vp = Viewport.from_gamedata(gdata)
    assert (vp.view_width, vp.view_height, vp.world_width, vp.world_height) == (640, 480, 2000, 900)


def test_starts_at_origin():
    vp = Viewport(100, 80, 1000, 500)
    assert vp.position == Vector2f(0, 0)


def test_update_centres_on_object():
    vp = Viewport(100, 80, 1000, 500)
    obj = _obj(500, 300)
    vp.track(obj)
    vp.update()
    assert vp.x + 100 / 2 == obj.x + 20 / 2
    assert vp.y + 80 / 2 == obj.y + 40 / 2


def test_update_clamps_at_origin():
    vp = Viewport(100, 80, 1000, 500)
    vp.track(_obj(1, 2))
    vp.update()
    assert (vp.x, vp.y) == (0, 0)


def test_update_clamps_at_far_edge():
    vp = Viewport(100, 80, 1000, 500)
    vp.track(_obj(990, 490))
    vp.update()
    assert vp.x == 1000 - 100
    assert vp.y == 500 - 80


def test_update_follows_object_movement():
    vp = Viewport(100, 80, 1000, 500)
    obj = _obj(300, 200)
    vp.track(obj)
    vp.update()
    before = vp.x
    obj.x += 25
    vp.update()
    assert vp.x - before == 25


def test_update_without_tracked_object_raises():
    vp = Viewport(100, 80, 1000, 500)
    with pytest.raises(RuntimeError):
        vp.update()


def test_position_is_a_copy():
    vp = Viewport(100, 80, 1000, 500)
    pos = vp.position
    pos[0] = 42
    assert vp.x == 0


def test_xy_setters():
    vp = Viewport(100, 80, 1000, 500)
    vp.x = 7
    vp.y = 9
    assert vp.position == Vector2f(7, 9)


def test_draw_reports_tracked_name():
    vp = Viewport(100, 80, 1000, 500)
    vp.track(_obj(0, 0, name="crocodile"))
    io = _RecordingIO()
    vp.draw(io)
    assert io.calls == [("Tracking crocodile", 30)]


def test_track_records_object():
    vp = Viewport(100, 80, 1000, 500)
    obj = _obj(0, 0)
    vp.track(obj)
    assert vp.tracked is obj