"""Game configuration read from an XML document into tag paths."""

from __future__ import annotations

import random
import re
from collections.abc import Mapping
from pathlib import Path
from xml.parsers import expat

DEFAULT_PATH = "xmlSpec/game.xml"
WORLD_WIDTH = 10000
WORLD_HEIGHT = 4500

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRAILING_WHITESPACE = " \n\t"


class GameDataError(Exception):
    """Raised when configuration cannot be read or a tag is missing."""


class _TagCollector:
    """Collects element text and attributes keyed by slash-separated paths."""

    def __init__(self) -> None:
        self.tags: list[str] = []
        self.data: dict[str, str] = {}

    def _path(self) -> str:
        if len(self.tags) > 1:
            return "/".join(self.tags[1:])
        return self.tags[0]

    def start(self, name: str, attrs: dict[str, str]) -> None:
        self.tags.append(name)
        path = self._path()
        for key, value in attrs.items():
            self.data.setdefault(f"{path}/{key}", value)

    def end(self, name: str) -> None:
        if not self.tags or self.tags[-1] != name:
            last = self.tags[-1] if self.tags else ""
            raise GameDataError(f"Tags {name} and {last} don't match")
        self.tags.pop()

    def chars(self, text: str) -> None:
        if not self.tags:
            return
        text = text.replace("\n", "").rstrip(_TRAILING_WHITESPACE)
        if text:
            self.data.setdefault(self._path(), text)


def parse_xml(source: str | bytes) -> dict[str, str]:
    """Parse XML text into a mapping from tag paths to values.

    The root element is left out of paths; attributes become
    ``path/attribute``. When a path occurs twice the first value wins.
    """
    collector = _TagCollector()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = collector.start
    parser.EndElementHandler = collector.end
    parser.CharacterDataHandler = collector.chars
    try:
        parser.Parse(source, True)
    except expat.ExpatError as exc:
        raise GameDataError(f"Couldn't parse XML: {exc}") from exc
    return collector.data


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if not match:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


class GameData:
    """Typed access to configuration values by tag path."""

    def __init__(self, data: Mapping[str, str], rng: random.Random | None = None) -> None:
        self._data = dict(data)
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_PATH, rng: random.Random | None = None) -> GameData:
        """Read configuration from an XML file."""
        try:
            content = Path(path).read_bytes()
        except OSError as exc:
            raise GameDataError(f"Cannot open xml file: {path}") from exc
        try:
            data = parse_xml(content)
        except GameDataError as exc:
            raise GameDataError(f"Couldn't parse file: {path}: {exc}") from exc
        return cls(data, rng)

    def _lookup(self, tag: str, kind: str) -> str:
        try:
            return self._data[tag]
        except KeyError:
            raise GameDataError(f"Game: Didn't find {kind} tag {tag} in xml") from None

    def get_bool(self, tag: str) -> bool:
        """True only when the value is exactly ``true``."""
        return self._lookup(tag, "boolean") == "true"

    def get_int(self, tag: str) -> int:
        """Leading integer of the value; 0 if it has none."""
        return _parse_int(self._lookup(tag, "integer"))

    def get_float(self, tag: str) -> float:
        """Leading number of the value; 0.0 if it has none."""
        return _parse_float(self._lookup(tag, "float"))

    def get_str(self, tag: str) -> str:
        """The raw value."""
        return self._lookup(tag, "string")

    def rand_float(self, low: float, high: float) -> float:
        """Random float in ``[low, high)``."""
        return low + self._rng.random() * (high - low)

    def rand_in_range(self, low: int, high: int) -> float:
        """Random float in ``[low, high)`` from integer bounds."""
        return low + self._rng.random() * (high - low)

    def __contains__(self, tag: object) -> bool:
        return tag in self._data