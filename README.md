# bouncyballs

A small arcade toy. Up to 256 balls bounce around a 320×224 screen. There are six palettes and
each ball draws its colour from one of them. Ball 0 uses palette 0, and every other ball uses one
of palettes 1–5 in turn. Palettes 1–5 get a random ball colour once, at start-up. The ball colour
of palette 0 changes on every frame: each RGB channel moves by a fixed random step and turns back
at 0 and at 255. You choose from the keyboard how many balls are moving.

## Installation

```
pip install .
```

This installs pygame. The game uses it for its window, drawing and keyboard input.

## Running

```
bouncyballs
```

Options:

- `--seed N` sets the random seed, so that ball speeds and colours can be repeated.
- `--frames N` stops after N frames. Without it the game runs until the window is closed.

The window is drawn at twice the screen size and runs at 60 frames per second.

## Controls

| Pad button | Key        | Effect                                  |
|------------|------------|-----------------------------------------|
| Up         | Up arrow   | Add one ball per frame (up to 256)      |
| Down       | Down arrow | Remove one ball per frame               |
| A / B / C  | Z / X / C  | Remove all balls                        |
| Left       | Left arrow | Shown on screen only                    |
| Right      | Right arrow| Shown on screen only                    |
| X / Y / Z  | A / S / D  | Shown on screen only                    |
| L / R      | Q / W      | Shown on screen only                    |
| Start      | Enter      | Shown on screen only                    |

The top line of the screen shows how many balls are active, as three digits. The lines below it
list the buttons that are held down on this frame, as `PAD_UP`, `PAD_A` and so on.

## Using the pieces as a library

The simulation is kept apart from the display, so you can run it without a window. The first call
to `Game.update` sets up the palettes and balls, then runs the first frame:

```python
import random

from bouncyballs.game import Game
from bouncyballs.input import KeyBit

game = Game(random.Random(1))

for _ in range(10):
    game.update(KeyBit.UP)

print(len(game.enabled_balls()))   # 10
print(game.status_lines())         # [(0, '010'), (1, 'PAD_UP')]
```

- `bouncyballs.game.Game` holds the palettes, the balls and the pad. It also keeps count of the
  balls in play. `update_pad`, `update_balls` and `animate_palette` are the three steps of one
  frame.
- `bouncyballs.ball.Ball` is one ball. Its position and speed are 16.16 fixed-point numbers.
  `from_fixed` and `to_fixed` convert to and from that format. `Ball.spawn` makes a ball at the
  centre with a random speed. `Ball.update` moves the ball and bounces it off the screen edges.
- `bouncyballs.pad.Pad` holds the key state for this frame and for the one before. From these it
  answers "held" (`is_button_pressed`, `is_button_pressed_key_bit`) and "newly pushed"
  (`is_button_pushed`).
- `bouncyballs.input` defines the `Key` and `KeyBit` enums. `key_state_from_pressed` builds a key
  state from the buttons that are held.
- `bouncyballs.global_state.GlobalState` is the small phase machine. It runs initialisation once
  and then the update on every frame.
- `bouncyballs.app.render` draws a game onto any pygame surface.

## What it does not do

- There is no gamepad support. Input comes from the keyboard only.
- Balls are drawn as filled circles in their palette's ball colour, not from an image file.

## Tests

```
pip install ".[test]"
pytest
```