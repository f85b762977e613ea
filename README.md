# bullethell

A small arcade game built on pygame: steer the player around a 1200×900
window while the health bar near the top-left corner drains, turning from
green to yellow to red.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
bullethell
```

By default the game looks for its assets relative to the current directory.
Point it at another directory with `--assets`:

```
bullethell --assets path/to/assets
```

The asset directory must hold:

- `Textures/player.png`, `Textures/image.png`: the two frames of the player
  sprite; the first is shown for one second, then the second for one second,
  and the cycle starts again
- `Textures/Health bar.png`, `Textures/Current health.png`: the health bar
  frame and its fill
- `Music/Anxiety.wav`: background music, looped at volume 0.15
- `Sounds/sound.wav`: the sound played when Space is pressed

If the audio engine cannot start, the command prints a message to standard
error and exits with status 1.

### Controls

| Key                | Action          |
|--------------------|-----------------|
| W / Up arrow       | move up         |
| S / Down arrow     | move down       |
| A / Left arrow     | move left       |
| D / Right arrow    | move right      |
| Space              | play a sound    |
| Escape             | quit            |

Closing the window also quits. The player moves at 450 pixels per second;
diagonal movement is normalised, so the speed is the same in every direction.

### Health

Health starts at 200 and is a whole number: each frame it loses the frame's
time in seconds, truncated toward zero. The fill's width follows the health.
Its colour comes from `bullethell.game.health_color`: green from 132 up,
yellow from 66 up, red below that. Health stops at 0.

## Using the pieces

- `bullethell.input.Input` keeps the set of held keys for this frame and the
  last. Feed it with `update(pressed)` once per frame; `reset()` releases
  everything. It answers `is_key_pressed`, `is_key_down`, `is_key_released`
  and `is_key_up`.
- `bullethell.audio.Audio` starts the pygame mixer with `initialize()`, plays
  one-shot sounds with `play_sound(path)` (caching each loaded file) and
  loops music with `play_music(music)`; `clear()` shuts it down. It also works
  as a context manager. `AudioError` is raised when the mixer cannot start, a
  sound file cannot be loaded, or the engine is used before it is started.
- `bullethell.resources.ResourceManager` loads textures and music by key with
  `load_texture` and `load_music`, returns them with `get_texture` and
  `get_music`, and stops and drops them all with `clear()`. `ResourceError`
  is raised when a file cannot be loaded or a key was never loaded.
- `bullethell.sprite_renderer.SpriteRenderer` draws a texture onto a surface,
  scaled, tinted by an RGB colour in 0–1, and rotated counter-clockwise in
  degrees, in coordinates whose origin is the bottom-left corner with y
  pointing up. `draw_sprite` returns the rectangle drawn.
- `bullethell.entities.GameObject` (with velocity, rotation and a `destroyed`
  flag) and `bullethell.entities.UserInterface` (never rotated) hold a sprite
  and draw it through a renderer with `draw_sprite(renderer)`.
- `bullethell.game.Game` ties these together: `initialize_game()`, then per
  frame `update_game(dt)`, `handle_input(dt)` and `render_game(dt)`.
  `TextureKey` and `MusicKey` name the stored resources.
- `bullethell.window.Window` opens the display (`initialize_window`), turns
  pygame events into key state (`handle_event`), runs one frame
  (`update_window`) or frames until asked to close (`run`), and releases
  everything (`close`). `bullethell.window.main` is what the `bullethell`
  command calls.

## What it does not do

Despite the name, there are no bullets, enemies, collisions or score. The
player is not kept inside the window, and reaching zero health does not end
the game; only Escape or closing the window does.