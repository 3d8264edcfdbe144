"""The game: builds the world and its sprites, runs the event loop."""

from __future__ import annotations

import argparse
import os
import random
from enum import IntEnum

import pygame

from junglerun.clock import Clock
from junglerun.enemy_sprite import EnemySprite
from junglerun.frame_factory import FrameFactory
from junglerun.gamedata import GameData
from junglerun.health import Health
from junglerun.hud import Hud
from junglerun.io_manager import IOManager
from junglerun.key_sprite import KeySprite
from junglerun.scaled_sprite import ScaledSprite
from junglerun.sound import MUSIC_FILE, Sound
from junglerun.two_way_sprite import TwoWaySprite
from junglerun.vector2f import Vector2f
from junglerun.viewport import Viewport
from junglerun.world import World

DEFAULT_CONFIG = "xmlSpec/game.xml"

_SHOOT_SOUND = 0
_EXPLOSION_SOUND = 2
_KEY_SOUND = 3
_TITLE_X = 10
_TITLE_Y = 450
_KEY_PARK_OFFSET = 200
_HUD_HIDE_SECOND = 2
_LAYER_SCALES = (0.5, 1.0, 1.5)


class GameMode(IntEnum):
    """Whether touching the enemy hurts the player or the enemy."""

    NORMAL = 0
    GOD = 1


class Manager:
    """Owns every game object and drives drawing, updating and input."""

    def __init__(self, gdata: GameData) -> None:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.init()
        self.gdata = gdata
        self.io = IOManager.from_gamedata(gdata)
        self.screen = self.io.screen
        self.clock = Clock.from_gamedata(gdata)
        self.show_hud = gdata.get_bool("hud/showHud")
        self.pool_hud = gdata.get_bool("hud/poolHud")

        self.banana_surface = self.io.load_and_set(
            gdata.get_str("banana/file"), gdata.get_bool("banana/transparency")
        )
        self.pineapple_surface = self.io.load_and_set(
            gdata.get_str("pineapple/file"), gdata.get_bool("pineapple/transparency")
        )

        self.viewport = Viewport.from_gamedata(gdata)
        self.factory = FrameFactory(gdata, self.io, self.viewport)
        self.night_sky = self._layer("night_sky")
        self.front_building = self._layer("front_building")
        self.platform = self._layer("platform")

        self.current_sprite = 0
        self.make_video = False
        self.frame_count = 0
        self.username = gdata.get_str("username")
        self.title = gdata.get_str("screenTitle")
        self.frame_max = gdata.get_int("frameMax")

        self.hud = Hud.from_gamedata(gdata, self.io, self.screen, self.clock)
        self.health = Health.from_gamedata(gdata, self.screen)
        self.world_width = gdata.get_int("world/width")
        self.world_height = gdata.get_int("world/height")
        self.show_reset_hud = False
        self.mode = GameMode.NORMAL

        self.fruits: list[ScaledSprite] = []
        self._make_fruits()
        pygame.display.set_caption(self.title)

        self.player = TwoWaySprite.from_gamedata("monkey", gdata, self.factory)
        self.enemy = EnemySprite.from_gamedata(
            "crocodile",
            gdata,
            self.factory,
            self.player.frame.width // 2,
            self.player.frame.height // 2,
        )
        self.player.attach(self.enemy)
        self.key = KeySprite.from_gamedata("key", gdata, self.factory)
        self.sprites = [self.player, self.enemy, self.key]
        self.viewport.track(self.sprites[self.current_sprite])

        music = gdata.get_str("sound/music") if "sound/music" in gdata else MUSIC_FILE
        self.sound = Sound(music)

    def _layer(self, name: str) -> World:
        return World(self.factory.get_frame(name), self.gdata.get_int(name + "/factor"), self.viewport)

    def _make_fruits(self) -> None:
        count = self.gdata.get_int("numberOfFruits")
        self.fruits = [
            ScaledSprite("pineapple", self.pineapple_surface, self.gdata, self.screen, self.viewport)
            for _ in range(0, count, 2)
        ]
        self.fruits.sort(key=lambda fruit: fruit.scale)

    def __enter__(self) -> Manager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Stop the sound and shut pygame down."""
        self.sound.close()
        pygame.quit()

    @staticmethod
    def _draw_fruits(fruits: list[ScaledSprite], scale: float) -> list[ScaledSprite]:
        """Draw the leading fruits of ``scale``; return the ones not reached."""
        drawn = 0
        for fruit in fruits:
            if fruit.scale != scale:
                break
            fruit.draw()
            drawn += 1
        return fruits[drawn:]

    def draw(self) -> None:
        """Draw the layers with their fruits, the sprites and the overlays."""
        remaining = self.fruits
        layers = (self.night_sky, self.front_building, self.platform)
        for layer, scale in zip(layers, _LAYER_SCALES):
            layer.draw()
            remaining = self._draw_fruits(remaining, scale)
        for sprite in self.sprites:
            sprite.draw()
        self.io.print_message_at(self.title, _TITLE_X, _TITLE_Y)
        if self.show_hud:
            self.hud.draw()
        if self.pool_hud:
            self.hud.pool_hud(self.player.bullet_count(), self.player.free_count())
        self.health.draw()
        if self.player.is_game_over() and self.show_reset_hud:
            self.hud.reset_menu()
        self.hud.god_mode(self.mode)
        self.viewport.draw(self.io)
        pygame.display.flip()

    def make_frame(self) -> str:
        """Save the screen as the next numbered video frame; return its path."""
        filename = f"frames/{self.username}.{self.frame_count:04d}.bmp"
        self.frame_count += 1
        print(f"Making frame: {filename}")
        os.makedirs(os.path.dirname(filename), exist_ok=True)
        pygame.image.save(self.screen, filename)
        return filename

    def _video_make(self) -> None:
        if self.make_video and self.frame_count < self.frame_max:
            self.make_frame()

    def switch_sprite(self) -> None:
        """Make the viewport follow the next sprite."""
        self.current_sprite = (self.current_sprite + 1) % len(self.sprites)
        self.viewport.track(self.sprites[self.current_sprite])

    def _explode(self, sprite) -> None:
        if not sprite.is_exploding():
            self.sound.play(_EXPLOSION_SOUND)
        sprite.explode()

    def update(self) -> None:
        """Advance the game by one frame and resolve collisions."""
        self.clock.tick()
        ticks = self.clock.elapsed_ticks()
        self._video_make()
        for sprite in self.sprites:
            sprite.update(ticks)

        if self.player.collided_with(self.key):
            self.sound.play(_KEY_SOUND)
            self.key.position = Vector2f(self.world_width + _KEY_PARK_OFFSET, 0)
            self.sound.toggle_music()

        if self.player.bullets_collided_with(self.enemy):
            self._explode(self.enemy)

        if self.player.collided_with(self.enemy):
            if self.mode is GameMode.NORMAL:
                self._explode(self.player)
                self.health.reset()
            else:
                self._explode(self.enemy)

        self.night_sky.update()
        self.front_building.update()
        self.platform.update()

        for fruit in self.fruits:
            fruit.update(ticks)
            if self.mode is GameMode.NORMAL and fruit.collided_with(self.player):
                self.health.update(ticks)
                if self.health.is_health_zero():
                    self._explode(self.player)
                    self.health.reset()
                fruit.position = Vector2f(
                    int(self.gdata.rand_in_range(0, self.world_width)),
                    -int(self.gdata.rand_in_range(0, self.world_height)),
                )
        self.viewport.update()

    def reset(self) -> None:
        """Start over after the game has ended."""
        self.sound.toggle_music()
        for sprite in self.sprites:
            sprite.reset()
        self.health.reset()
        self.mode = GameMode.NORMAL

    def handle_event(self, event) -> bool:
        """React to one event; True when the game should end."""
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN:
            key = event.key
            if key in (pygame.K_ESCAPE, pygame.K_q):
                return True
            if key == pygame.K_t:
                self.player.explode()
            elif key == pygame.K_a:
                self.player.left()
            elif key == pygame.K_d:
                self.player.right()
            elif key == pygame.K_w:
                self.player.up()
            elif key == pygame.K_s and not self.show_reset_hud:
                self.sound.play(_SHOOT_SOUND)
                self.player.shoot()
            elif key == pygame.K_g and not self.show_reset_hud:
                self.mode = GameMode.NORMAL if self.mode is GameMode.GOD else GameMode.GOD
                self.hud.god_mode(self.mode)
            elif key == pygame.K_r and self.show_reset_hud:
                self.reset()
                self.show_reset_hud = False
            elif key == pygame.K_p:
                if self.clock.paused:
                    self.clock.unpause()
                else:
                    self.clock.pause()
            elif key == pygame.K_F4 and not self.make_video:
                print("Making video frames")
                self.make_video = True
            elif key == pygame.K_F1:
                self.show_hud = not self.show_hud
            elif key == pygame.K_F2:
                self.pool_hud = not self.pool_hud
        elif event.type == pygame.KEYUP:
            pressed = pygame.key.get_pressed()
            if not pressed[pygame.K_w]:
                self.player.stop_y()
            if not pressed[pygame.K_a] and not pressed[pygame.K_d]:
                self.player.stop_x()
        return False

    def play(self) -> None:
        """Run the game loop until the player quits."""
        done = False
        while not done:
            for event in pygame.event.get():
                if self.handle_event(event):
                    done = True
                    break
            if self.clock.seconds == _HUD_HIDE_SECOND:
                self.show_hud = False
            self.draw()
            if not self.player.is_game_over():
                self.update()
            else:
                self.show_reset_hud = True
                self._video_make()


def main(argv=None) -> int:
    """Load the settings and play until the window is closed."""
    parser = argparse.ArgumentParser(prog="junglerun", description="Side-scrolling jungle game.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="game settings XML file")
    args = parser.parse_args(argv)
    try:
        gdata = GameData.from_file(args.config, random.Random())
        with Manager(gdata) as manager:
            manager.play()
    except Exception as exc:  # noqa: BLE001 - report any failure and exit cleanly
        print(str(exc) or "Oops, someone threw an exception!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())