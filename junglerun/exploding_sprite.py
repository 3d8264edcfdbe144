"""A sprite broken into chunks that fly apart."""

from __future__ import annotations

import random

from junglerun.chunk import Chunk
from junglerun.extract_surface import extract_surface
from junglerun.frame import Frame
from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f

_BASE_SPEED_X = 140
_BASE_SPEED_Y = 40


class ExplodingSprite(Sprite):
    """An explosion made of the chunks of a sprite's frame."""

    def __init__(
        self,
        sprite: Sprite,
        chunk_size: int,
        speed_x: float,
        speed_y: float,
        max_distance: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            sprite.name,
            sprite.position,
            sprite.velocity,
            sprite.frame,
            sprite.world_width,
            sprite.world_height,
        )
        self.speed_x = float(speed_x)
        self.speed_y = float(speed_y)
        self.max_distance = float(max_distance)
        self._rng = rng if rng is not None else random.Random()
        self.chunks: list[Chunk] = []
        self.free_list: list[Chunk] = []
        self.make_chunks(chunk_size)

    @classmethod
    def from_gamedata(cls, sprite: Sprite, gdata) -> ExplodingSprite:
        """Read the explosion settings kept under the sprite's name."""
        name = sprite.name
        return cls(
            sprite,
            gdata.get_int(name + "/chunk/size"),
            gdata.get_int(name + "/speedX"),
            gdata.get_int(name + "/speedY"),
            gdata.get_int(name + "/chunk/distance"),
        )

    def _random_speed(self, spread: int, base: int) -> float:
        value = self._rng.randrange(spread) + base
        return float(-value if self._rng.randrange(2) else value)

    def make_chunks(self, n: int) -> None:
        """Cut the frame into an ``n`` by ``n`` grid of flying chunks."""
        if n <= 0:
            raise ValueError(f"chunk count must be positive, got {n}")
        frame = self.frame
        chunk_width = max(1, frame.width // n)
        chunk_height = max(1, frame.height // n)
        # Both directions use the horizontal speed setting.
        spread_x = abs(int(self.speed_x)) or 1
        spread_y = abs(int(self.speed_x)) or 1
        for source_y in range(0, frame.height, chunk_height):
            for source_x in range(0, frame.width, chunk_width):
                sx = self._random_speed(spread_x, _BASE_SPEED_X)
                sy = self._random_speed(spread_y, _BASE_SPEED_Y)
                surface = extract_surface(frame.surface, chunk_width, chunk_height, source_x, source_y)
                self.chunks.append(
                    Chunk(
                        Vector2f(self.x + source_x, self.y + source_y),
                        Vector2f(sx, sy),
                        self.name + "/chunk",
                        Frame(surface, frame.screen, frame.viewport),
                        self.world_width,
                        self.world_height,
                        self.max_distance,
                    )
                )

    def draw(self) -> None:
        for chunk in self.chunks:
            chunk.draw()

    def update(self, ticks: int) -> None:
        remaining = []
        for chunk in self.chunks:
            chunk.update(ticks)
            if chunk.gone_too_far():
                self.free_list.append(chunk)
            else:
                remaining.append(chunk)
        self.chunks = remaining

    def chunk_count(self) -> int:
        """Chunks still flying."""
        return len(self.chunks)

    def free_count(self) -> int:
        """Chunks that have gone out of range."""
        return len(self.free_list)