# junglerun

A small side-scrolling arcade game built on pygame. You play a monkey on a
jungle platform under a night sky. Pineapples of random sizes fall from
above; the large ones drain your health bar when they hit you, and an empty
bar blows you up. A crocodile walks the level and turns back toward you
whenever it has wandered too far away; touching it blows you up. Somewhere
in the world a key bounces around. Reach the key to end the game.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
junglerun
```

or, with a settings file somewhere other than the default
`xmlSpec/game.xml`:

```
junglerun path/to/game.xml
```

Start the game from a directory that holds its resources: the XML settings
file, the images and font it names, and a `sound/` directory with the
background music (`sound/background.mp3`, unless the settings give a
`sound/music` tag) and the sound effects. Sprite positions and speeds,
frame counts, world and view sizes, HUD placement and the number of fruits
are all read from the XML file. If anything fails while starting or
playing, the command prints the error message and exits.

### Keys

| Key        | Action                                                             |
|------------|--------------------------------------------------------------------|
| A          | run left                                                           |
| D          | run right                                                          |
| W          | jump                                                               |
| S          | shoot                                                              |
| G          | toggle god mode (the crocodile is destroyed instead of you, and fruit does no harm) |
| T          | blow the monkey up                                                 |
| P          | pause / resume                                                     |
| R          | start again after the game is over                                 |
| F1         | show or hide the help HUD (it also hides itself after two seconds) |
| F2         | show or hide the bullet pool counters                              |
| F4         | start saving frames as `frames/<username>.NNNN.bmp`                |
| Esc or Q   | quit                                                               |

## Using the pieces

The game is made of small parts that can be used on their own:

- `junglerun.gamedata` — `parse_xml` flattens an XML document into
  slash-separated tags (`"monkey/startLoc/x"`, with the root element left
  out and attributes as `path/attribute`), and `GameData` gives typed access
  with `get_int`, `get_float`, `get_bool` and `get_str`, raising
  `GameDataError` for a missing tag. `GameData.from_file` reads a file.
- `junglerun.vector2f` — `Vector2f`, a mutable two-component vector with
  arithmetic operators, `magnitude`, `magnitude_squared`, `normalize`,
  `dot` and `copy`. Dividing by, or normalizing, something too close to zero
  raises `ValueError`.
- `junglerun.aaline` — `draw_pixel`, `draw_aaline` and `draw_line` blend
  thick, anti-aliased lines onto 24- and 32-bit pygame surfaces.
- `junglerun.extract_surface` — `extract_surface` copies a rectangle of raw
  pixels out of a surface.
- `junglerun.collision` — `RectangularCollisionStrategy`,
  `MidPointCollisionStrategy` and `PerPixelCollisionStrategy`, each with
  `execute(obj1, obj2)`.
- `junglerun.clock` — `Clock`, a pausable game clock with slow motion, an
  optional frame-rate cap and a running average frame rate; the time source
  and sleep function can be passed in.
- Sprites: `Drawable` (the base class), `Sprite`, `MultiSprite`,
  `TwoWaySprite` (the player), `EnemySprite`, `KeySprite`, `ScaledSprite`,
  `Bullet` and `MultiBullet` (a bullet pool with a free list), and
  `ExplodingSprite`, which breaks a sprite into flying `Chunk`s.
- Screen parts: `Frame`, `FrameFactory` (loads and caches frames and frame
  strips), `IOManager` (screen, image loading and text), `Viewport`,
  `World` (wrapping parallax backgrounds), `Health`, `Hud` and `Sound`.
- `junglerun.manager` — `Manager` builds everything from a `GameData` and
  runs the loop with `play`; `main` is what the `junglerun` command starts.

## What it does not do

The game ships without its resources: no settings file, images, font or
sounds come with the package, so `junglerun` only runs where those are
provided. There is no level selection, score keeping or saved state.