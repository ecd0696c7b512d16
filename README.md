# arcadetrio

Three small arcade games in one package. Each one runs in its own fixed-size window and is drawn with pygame.

- **Flappy Bird** (`arcadetrio.flappy`): a 288×512 window. Press **Space** to flap. A pair of pipes arrives every two seconds, with the gap at a random height. The game ends when the bird touches a pipe. It also ends when the bird reaches the top or bottom of the window, but only while at least one pipe is on screen.
- **Pong** (`arcadetrio.pong`): an 800×600 window with two paddles and one ball. Player 1 plays at the top with **A** / **D**. Player 2 plays at the bottom with **←** / **→**. The ball bounces off all four walls and off the paddles.
- **Snake** (`arcadetrio.snake`): an 800×600 window. Steer with the arrow keys. The snake cannot turn straight back on itself. Eating food adds one segment, and a new piece of food appears at a random place. The game ends when the head runs into the body. A snake shorter than four segments cannot collide with itself.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Playing

```
arcadetrio-flappy
arcadetrio-pong
arcadetrio-snake
```

`arcadetrio-flappy` accepts `--assets DIR`, the directory that holds `background.png`, `pipe.png`, `bird-down.png` and `bird-up.png`. The default is `assets`. If an image is missing, a plain coloured rectangle is drawn in its place.

Close the window to quit. Flappy Bird and Snake also close their window when the game ends.

## Using the game logic

The game rules are kept apart from the drawing code, so a game can be advanced one frame at a time without a window:

```python
from arcadetrio.pong import PongGame

game = PongGame()
game.step(1 / 60, pressed={"a"})
print(game.ball.x, game.ball.y)
```

- `FlappyGame.step(dt, jump_pressed)` returns `False` once the bird has crashed.
- `PongGame.step(dt, pressed)` takes the key names `"a"`, `"d"`, `"left"` and `"right"`.
- `SnakeGame.step(dt, pressed)` takes `"up"`, `"down"`, `"left"` and `"right"`. It returns `False` once the snake has bitten itself.

`FlappyGame` and `SnakeGame` accept an `rng` (a `random.Random`), so pipe gaps and food positions can be made reproducible.

Each game also exposes the rules that `step` is built from:

- Flappy Bird: `FlappyGame.jump`, `update_bird`, `spawn_pipes`, `move_pipes`, `despawn_pipes` and `bird_collides`. The module also provides `pipe_pair`, `Rect` and `rect_from_center_size`.
- Pong: `PongGame.handle_input`, `move_ball`, `wall_collision` and `paddle_collision`, plus the module-level `aabb_collision`.
- Snake: `SnakeGame.handle_input`, `move`, `eat_food`, `spawn_food` and `self_collision`.

## What the games do not do

- There is no score, menu, pause or restart in any of the games.
- In Pong, missing the ball costs nothing: the ball bounces off the top and bottom walls as well.
- In Snake, leaving the window is not fatal. The snake keeps moving off screen.

## Running the tests

```
pytest
```