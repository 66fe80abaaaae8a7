# flappy

A Flappy Bird clone. The bird falls under gravity, the Space key makes it flap,
and pipes scroll in from the right. You score a point each time the bird
reaches a pipe. If you hit a pipe or fall off the bottom of the screen, the
game is over. Flying above the top of the screen does not end the game; the
bird is held at the top edge.

## Installing

```
pip install .
```

## Playing

```
flappy
```

By default the game looks for its images, sounds and font in an `assets`
directory under the current working directory. Another directory can be given
with `--assets`:

```
flappy --assets /path/to/assets
```

The directory must hold:

```
audio/score.wav
audio/flap.wav
audio/crash.wav
images/background.png
images/pipe.png
images/gameover.png
images/flappy1.png
images/flappy2.png
fonts/flappy.ttf
```

If no audio device is available, the game runs without sound.

Controls:

- **Space**: start the game, then flap
- **C**: restart after a game over
- Close the window to quit

The high score lasts until you quit; it is not saved anywhere.

## Using the model on its own

The game rules live in `flappy.model` and do not import pygame, so the game
can be driven headlessly, for tests or for experiments with automated players.

```python
import random

from flappy.model import Action, Model
from flappy.state import TextureSpec

bird = TextureSpec(34, 24, 2.0, 2.0)   # texture width, height, x scale, y scale
pipe = TextureSpec(52, 320, 2.0, 2.0)
model = Model.default((1000, 600), bird, pipe, random.Random(0))
model.reset()

state = model.update(Action.FLAP)  # the first flap starts the game
while not state.is_game_over:
    state = model.update(Action.NONE)
print(state.score, state.high_score)
```

`Model.reset()` must be called before the first `Model.update()`. Each call to
`update` advances the game by one step with the given `Action` (`NONE`,
`FLAP` or `RESTART`) and returns a `flappy.state.State` snapshot: the bird and
the visible pipes (each as a mapping with `x`, `y` and `type`), the score, the
high score, the step counter, and flags for a flap, a reached pipe, a crash and
game over. `RESTART` only has an effect once the game is over.

`Model.default` uses `flappy.factory.SimpleFactory`, which places a new pair of
pipes every 150 steps at a random height, with a gap five bird-heights tall.
Pass your own `random.Random` to make the pipe heights reproducible, or give
`Model` another `flappy.factory.Factory` subclass.

## Other front ends

`flappy.controller.Controller` connects a `flappy.view.View` to a `Model`: it
resets the model, then feeds the view's input to the model and each state back
to the view until the view is closed. `Controller.default()` builds a
`flappy.view.PygameView` window and a model sized to it. To use a different
front end, subclass `View`, implement its abstract methods, and pass an
instance to `Controller(view, model)`.