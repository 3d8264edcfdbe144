"""An animated enemy that turns toward the player and can explode."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from junglerun.exploding_sprite import ExplodingSprite
from junglerun.multisprite import MultiSprite
from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)


class EnemySprite(MultiSprite):
    """A walker that turns back toward a distant player."""

    def __init__(
        self,
        name: str,
        position: Vector2f,
        velocity: Vector2f,
        frames: Sequence,
        world_width: int,
        world_height: int,
        frame_interval: int,
        attack_distance: float,
        player_width: int,
        player_height: int,
        make_explosion: Callable[[Sprite], object],
    ) -> None:
        if len(frames) < 2:
            raise ValueError(f"{name} needs at least two frames")
        super().__init__(name, position, velocity, frames, world_width, world_height, frame_interval)
        self.start_position = Vector2f(position[0], position[1])
        self.attack_distance = float(attack_distance)
        self.player_width = int(player_width)
        self.player_height = int(player_height)
        self.player_pos = Vector2f(0, 0)
        self._make_explosion = make_explosion
        self.explosion = None

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory, player_width: int, player_height: int) -> EnemySprite:
        """Build from the sprite settings plus ``name/attackDistance``."""
        return cls(
            name,
            Vector2f(gdata.get_int(name + "/startLoc/x"), gdata.get_int(name + "/startLoc/y")),
            Vector2f(gdata.get_int(name + "/speedX"), gdata.get_int(name + "/speedY")),
            factory.get_frames(name),
            gdata.get_int("world/width"),
            gdata.get_int("world/height"),
            gdata.get_int(name + "/frameInterval"),
            gdata.get_int(name + "/attackDistance"),
            player_width,
            player_height,
            lambda sprite: ExplodingSprite.from_gamedata(sprite, gdata),
        )

    def set_player_pos(self, position: Vector2f) -> None:
        """Remember where the player is."""
        self.player_pos = Vector2f(position[0], position[1])

    def is_exploding(self) -> bool:
        return self.explosion is not None

    def explode(self) -> None:
        """Start an explosion unless one is already running."""
        if self.explosion is not None:
            return
        sprite = Sprite(
            self.name,
            self.position,
            self.velocity,
            self.frames[self.current_frame],
            self.world_width,
            self.world_height,
        )
        self.explosion = self._make_explosion(sprite)

    def draw(self) -> None:
        if self.explosion is not None:
            self.explosion.draw()
        else:
            super().draw()

    def update(self, ticks: int) -> None:
        self.advance_frame(ticks)
        if self.explosion is not None:
            self.explosion.update(ticks)
            if self.explosion.chunk_count() == 0:
                self.explosion = None
                self.reset()
            return

        super().update(ticks)
        frame = self.frame
        x = self.x + frame.width // 2
        y = self.y + frame.height // 2
        ex = self.player_pos.x + self.player_width // 2
        ey = self.player_pos.y + self.player_height // 2
        if distance(x, y, ex, ey) > self.attack_distance:
            vx = self.velocity_x
            if (vx > 0 and self.player_pos.x < self.x) or (vx < 0 and self.player_pos.x > self.x):
                self.velocity_x = -vx

    def advance_frame(self, ticks: int) -> None:
        """First half of the strip when moving left, second half otherwise."""
        self.time_since_last_frame += ticks
        if self.time_since_last_frame > self.frame_interval:
            half = self.number_of_frames // 2
            step = (self.current_frame + 1) % half
            self.current_frame = step if self.velocity_x < 0 else half + step
            self.time_since_last_frame = 0.0

    def reset(self) -> None:
        """Go back to the starting position."""
        self.position = self.start_position.copy()