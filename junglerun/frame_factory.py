"""Loads and caches frames so each image is read only once."""

from __future__ import annotations

from junglerun.extract_surface import extract_surface
from junglerun.frame import Frame


class FrameFactory:
    """Makes single frames and frame strips by name, reusing earlier results."""

    def __init__(self, gdata, io, viewport=None) -> None:
        self._gdata = gdata
        self._io = io
        self._viewport = viewport
        self._frames: dict[str, Frame] = {}
        self._multi_frames: dict[str, list[Frame]] = {}

    def get_frame(self, name: str) -> Frame:
        """The frame for a whole image named by ``name/file``."""
        frame = self._frames.get(name)
        if frame is None:
            surface = self._io.load_and_set(
                self._gdata.get_str(name + "/file"),
                self._gdata.get_bool(name + "/transparency"),
            )
            frame = Frame(surface, self._io.screen, self._viewport)
            self._frames[name] = frame
        return frame

    def get_frames(self, name: str) -> list[Frame]:
        """Frames cut side by side from a sprite sheet of ``name/frames`` pieces."""
        frames = self._multi_frames.get(name)
        if frames is None:
            sheet = self._io.load_and_set(self._gdata.get_str(name + "/file"), True)
            count = self._gdata.get_int(name + "/frames")
            if count <= 0:
                raise ValueError(f"{name}/frames must be positive, got {count}")
            width = sheet.get_width() // count
            height = sheet.get_height()
            frames = [
                Frame(extract_surface(sheet, width, height, i * width, 0), self._io.screen, self._viewport)
                for i in range(count)
            ]
            self._multi_frames[name] = frames
        return list(frames)