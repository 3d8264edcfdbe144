"""The player: a sprite that walks both ways, jumps, idles, shoots and explodes."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from junglerun.collision import PerPixelCollisionStrategy, RectangularCollisionStrategy
from junglerun.exploding_sprite import ExplodingSprite
from junglerun.multibullet import MultiBullet
from junglerun.multisprite import MultiSprite
from junglerun.sprite import Sprite
from junglerun.vector2f import Vector2f

_SHOT_INTERVAL = 500
_MUZZLE_X = 120
_MUZZLE_Y = 35


class TwoWaySprite(MultiSprite):
    """A player-controlled animated sprite.

    The frame strip holds walking frames for both directions followed by
    ``idle_frames`` idle frames, half for each facing.
    """

    def __init__(
        self,
        name: str,
        position: Vector2f,
        speed: Vector2f,
        frames: Sequence,
        world_width: int,
        world_height: int,
        frame_interval: int,
        idle_frames: int,
        idle_time_limit: int,
        multibullet: MultiBullet,
        make_explosion: Callable[[Sprite], object],
    ) -> None:
        super().__init__(name, position, Vector2f(0, 0), frames, world_width, world_height, frame_interval)
        idle_frames = int(idle_frames)
        if idle_frames < 2:
            raise ValueError(f"{name} needs at least two idle frames, got {idle_frames}")
        if self.number_of_frames - idle_frames < 2:
            raise ValueError(f"{name} needs at least two walking frames")
        self.speed = Vector2f(speed[0], speed[1])
        self.start_position = Vector2f(position[0], position[1])
        self.idle_frames = idle_frames
        self.idle_time = 0
        self.idle_time_limit = int(idle_time_limit)
        self.is_jumping = False
        self.multibullet = multibullet
        self._make_explosion = make_explosion
        self.explosion = None
        self.delta_time = 0
        self.interval = _SHOT_INTERVAL
        self.explosion_time = 0
        self.game_end = False
        self.facing_left = True
        self._rectangular = RectangularCollisionStrategy()
        self._per_pixel = PerPixelCollisionStrategy()
        self.observers: list = []

    @classmethod
    def from_gamedata(cls, name: str, gdata, factory) -> TwoWaySprite:
        """Build from the sprite settings, ``name/idleframe`` and ``idleTimeLimit``."""
        return cls(
            name,
            Vector2f(gdata.get_int(name + "/startLoc/x"), gdata.get_int(name + "/startLoc/y")),
            Vector2f(gdata.get_int(name + "/speedX"), gdata.get_int(name + "/speedY")),
            factory.get_frames(name),
            gdata.get_int("world/width"),
            gdata.get_int("world/height"),
            gdata.get_int(name + "/frameInterval"),
            gdata.get_int(name + "/idleframe"),
            gdata.get_int("idleTimeLimit"),
            MultiBullet.from_gamedata("bullet", gdata, factory),
            lambda sprite: ExplodingSprite.from_gamedata(sprite, gdata),
        )

    @property
    def _walking_frames(self) -> int:
        return self.number_of_frames - self.idle_frames

    def left(self) -> None:
        """Start walking toward the left edge unless already there."""
        if self.x > 0:
            self.velocity_x = self.speed.x

    def right(self) -> None:
        """Start walking toward the right edge unless already there."""
        if self.x < self.world_width - self.frame_width:
            self.velocity_x = -self.speed.x

    def up(self) -> None:
        """Jump, unless already in the air."""
        if not self.is_jumping:
            self._reset_from_idle()
            self.is_jumping = True
            self.velocity_y = -self.speed.y

    def stop_x(self) -> None:
        """Stop walking."""
        self.velocity_x = 0.0

    def stop_y(self) -> None:
        """Vertical motion ends on landing, so there is nothing to stop here."""

    def is_exploding(self) -> bool:
        return self.explosion is not None

    def bullet_count(self) -> int:
        """Bullets in flight."""
        return self.multibullet.bullet_count()

    def free_count(self) -> int:
        """Spent bullets waiting for reuse."""
        return self.multibullet.free_count()

    def shoot(self) -> None:
        """Fire a bullet in the facing direction."""
        self._reset_from_idle()
        self.multibullet.shoot_bullet(self.position + Vector2f(_MUZZLE_X, _MUZZLE_Y), self.facing_left)
        self.delta_time = 0

    def is_game_over(self) -> bool:
        """Whether the key has been reached."""
        return self.game_end

    def reset(self) -> None:
        """Back to the start, standing still, with the game running."""
        self.position = self.start_position.copy()
        self.velocity = Vector2f(0, 0)
        self.is_jumping = False
        self.game_end = False

    def collided_with(self, obj) -> bool:
        """Per-pixel collision; touching the ``key`` ends the game."""
        if not self._rectangular.execute(self, obj):
            return False
        hit = self._per_pixel.execute(self, obj)
        if obj.name == "key":
            self.game_end = hit
        return hit

    def bullets_collided_with(self, obj) -> bool:
        """Whether any of the player's bullets hits ``obj``."""
        return self.multibullet.collided_with(obj)

    def attach(self, observer) -> None:
        """Tell ``observer`` the player's position after every update."""
        self.observers.append(observer)

    def detach(self, observer) -> None:
        """Stop telling ``observer`` about the player's position."""
        for i, watcher in enumerate(self.observers):
            if watcher is observer:
                del self.observers[i]
                return

    def _reset_from_idle(self) -> None:
        self.idle_time = 0
        walking = self._walking_frames
        if self.current_frame >= walking:
            self.current_frame = 0 if self.facing_left else walking // 2

    def advance_frame(self, ticks: int) -> None:
        """Walk animation while moving sideways, idle animation after standing long enough."""
        self.time_since_last_frame += ticks
        walking = self._walking_frames

        if self.velocity_x == 0 and self.velocity_y == 0:
            self.idle_time += 1
            if self.idle_time > self.idle_time_limit and self.time_since_last_frame > self.frame_interval:
                half_idle = self.idle_frames // 2
                cushion = walking if self.facing_left else walking + half_idle
                if self.current_frame >= walking:
                    self.current_frame = cushion + (self.current_frame + 1) % half_idle
                else:
                    self.current_frame = cushion
                if self.current_frame in (walking + 2, walking + 3):
                    # Keep the eyes closed a little longer.
                    self.idle_time -= self.idle_time_limit // 5
                self.time_since_last_frame = 0.0
            return

        if self.velocity_x == 0:
            return
        self.idle_time = 0
        if self.time_since_last_frame > self.frame_interval:
            half = walking // 2
            step = (self.current_frame + 1) % half
            if self.velocity_x >= 0:
                self.current_frame = step
                self.facing_left = True
            else:
                self.current_frame = half + step
                self.facing_left = False
            self.time_since_last_frame = 0.0

    def update(self, ticks: int) -> None:
        if self.delta_time < self.interval:
            self.delta_time += ticks

        if self.explosion is not None:
            self.explosion_time += ticks
            self.explosion.update(ticks)
            if self.explosion.chunk_count() == 0 and self.explosion_time > 3 * self.interval:
                self.explosion_time = 0
                self.explosion = None
            return

        self.multibullet.update(ticks)
        self.advance_frame(ticks)
        self._move(ticks)

        if self.y < (self.world_height - self.frame_height) // 2:
            self.velocity_y = abs(self.velocity_y)
        if self.y > self.start_position.y:
            self.is_jumping = False
            self.velocity_y = 0.0
        if self.x <= 0:
            self.velocity_x = 0.0
        if self.x >= self.world_width - self.frame_width:
            self.velocity_x = 0.0

        for observer in self.observers:
            observer.set_player_pos(self.position)

    def explode(self) -> None:
        """Start an explosion unless one is already running."""
        if self.explosion is not None:
            return
        self._reset_from_idle()
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
            self.frame.draw(int(self.x), int(self.y))
            self.multibullet.draw()