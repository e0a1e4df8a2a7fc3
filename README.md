# gorillas

Two gorillas stand on rooftops in a random city skyline and take turns
throwing bananas at each other. Pick an angle (0–90 degrees) and a speed
(0–100), allow for the wind (-4 to 4), and try to hit the other gorilla. When
a banana lands on a building there is a 50% chance that the rooftops around
the impact are lowered by five pixels.

The game is drawn on a 128×64 one-bit framebuffer. The framebuffer is split
into eight 128-byte pages, and each page covers eight pixel rows. It can be
printed to the terminal as text, with `#` for a lit pixel and `.` for a dark
one.

## Installing

```
pip install .
```

## Playing

```
gorillas
```

Options:

- `--seed N` seeds the random generator that builds the city and picks the wind.
- `--no-screen` skips printing the framebuffer before each turn.

Each turn prints the screen, the current player and the wind, then asks for
an angle and a speed. Enter `q` or `quit` (or end input) at either prompt to
leave. After each shot the game says whether the banana missed or hit a
building. When a gorilla is hit, the winner is announced and you are asked
whether to play another round.

## Using the pieces

- `gorillas.framebuffer.Screen` is the page-organised pixel buffer. It can set
  and read pixels, draw 8×8 sprites, the banana and explosions, blank part of
  a page, and draw itself as text with `render()`. `format_number` formats an
  integer keeping at most its five lowest digits.
- `gorillas.world.World` holds the skyline, the wind and the two gorilla
  positions (`Position`). It is driven by the `random.Random` you pass in.
- `gorillas.physics.launch_velocity` and `trajectory` compute a throw;
  `simulate_shot` flies a banana across a world, drawing each frame and
  calling an optional `on_frame(screen)` callback. It returns a `ShotResult`
  whose `Outcome` is `MISS`, `BUILDING` or `GORILLA`, with the impact point
  and the number of frames.
- `gorillas.sound.Tone` produces the 8-bit DAC sample stream of a decaying
  sine tone; `launch_tone()` and `explosion_tone()` give the two effects, and
  `reload_value` gives the timer reload value for a frequency.
- `gorillas.game.Game` ties these together: the constructor starts a round,
  `new_round()` builds a fresh city, and `play_turn(angle, speed)` fires one
  shot for the current player. `scale_speed` and `scale_angle` turn 8-bit
  readings (0–255) into speed and angle.

```python
import random
from gorillas.game import Game

game = Game(random.Random(1))
result = game.play_turn(45, 60)
print(result.outcome, result.point, game.current_player)
```

## What it does not do

- It plays no audio. The tones for a throw and an explosion are kept as
  `Tone` objects in `Game.sounds`; nothing sends their samples to a device.
- The framebuffer holds no text. Scores, prompts and the wind value are
  printed to the console instead of being drawn on the screen.
- The console game does not animate the banana's flight; it prints the screen
  as it stands after each shot.

## Running the tests

```
pip install ".[test]"
pytest
```