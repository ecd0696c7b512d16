"""Two-player Pong: paddles at the top and bottom bounce a ball around the window."""

from __future__ import annotations

import argparse
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0

PADDLE_1_COLOR = (0.3, 0.7, 0.3)
PADDLE_2_COLOR = (0.3, 0.3, 0.7)
BALL_COLOR = (0.7, 0.3, 0.3)
CLEAR_COLOR = (0.9, 0.9, 0.9)

PADDLE_SIZE = (100.0, 10.0)
PADDLE_OFFSET = 20.0
PADDLE_SPEED = 400.0

BALL_SIZE = (10.0, 10.0)
BALL_VELOCITY = (300.0, 300.0)

# Key names understood by PongGame.handle_input, per player: (left, right).
PLAYER_KEYS = {1: ("a", "d"), 2: ("left", "right")}


@dataclass
class Paddle:
    """A player's paddle; player 1 sits at the top, player 2 at the bottom."""

    player: int
    x: float
    y: float


@dataclass
class Ball:
    x: float = 0.0
    y: float = 0.0
    vx: float = BALL_VELOCITY[0]
    vy: float = BALL_VELOCITY[1]


def aabb_collision(
    a_pos: Sequence[float],
    a_size: Sequence[float],
    b_pos: Sequence[float],
    b_size: Sequence[float],
) -> bool:
    """Return True when two centred axis-aligned boxes strictly overlap."""
    collision_x = abs(a_pos[0] - b_pos[0]) < (a_size[0] + b_size[0]) / 2
    collision_y = abs(a_pos[1] - b_pos[1]) < (a_size[1] + b_size[1]) / 2
    return collision_x and collision_y


def _default_paddles() -> list[Paddle]:
    return [
        Paddle(player=1, x=0.0, y=WINDOW_HEIGHT / 2 - PADDLE_OFFSET),
        Paddle(player=2, x=0.0, y=-WINDOW_HEIGHT / 2 + PADDLE_OFFSET),
    ]


@dataclass
class PongGame:
    """World state of a Pong game, advanced one frame at a time."""

    paddles: list[Paddle] = field(default_factory=_default_paddles)
    ball: Ball = field(default_factory=Ball)

    def handle_input(self, dt: float, pressed: Collection[str]) -> None:
        """Move paddles according to the held keys, staying inside the window."""
        min_x = -WINDOW_WIDTH / 2 + PADDLE_SIZE[0] / 2
        max_x = WINDOW_WIDTH / 2 - PADDLE_SIZE[0] / 2
        for paddle in self.paddles:
            keys = PLAYER_KEYS.get(paddle.player)
            if keys is None:
                continue
            left, right = keys
            if left in pressed and paddle.x > min_x:
                paddle.x -= PADDLE_SPEED * dt
            elif right in pressed and paddle.x < max_x:
                paddle.x += PADDLE_SPEED * dt

    def move_ball(self, dt: float) -> None:
        self.ball.x += self.ball.vx * dt
        self.ball.y += self.ball.vy * dt

    def wall_collision(self) -> None:
        """Reverse the ball's velocity along any axis where it reached a wall."""
        ball = self.ball
        half_w, half_h = BALL_SIZE[0] / 2, BALL_SIZE[1] / 2
        if ball.x < -WINDOW_WIDTH / 2 + half_w or ball.x > WINDOW_WIDTH / 2 - half_w:
            ball.vx = -ball.vx
        if ball.y < -WINDOW_HEIGHT / 2 + half_h or ball.y > WINDOW_HEIGHT / 2 - half_h:
            ball.vy = -ball.vy

    def paddle_collision(self) -> bool:
        """Bounce the ball off the first paddle it touches; return True if it did."""
        ball_pos = (self.ball.x, self.ball.y)
        for paddle in self.paddles:
            if aabb_collision(ball_pos, BALL_SIZE, (paddle.x, paddle.y), PADDLE_SIZE):
                self.ball.vy = -self.ball.vy
                return True
        return False

    def step(self, dt: float, pressed: Collection[str]) -> None:
        """Advance one frame."""
        self.handle_input(dt, pressed)
        self.move_ball(dt)
        self.wall_collision()
        self.paddle_collision()


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(c * 255) for c in color)  # type: ignore[return-value]


def main(argv=None) -> int:
    """Open a window and play Pong until the window is closed."""
    parser = argparse.ArgumentParser(prog="pong", description="Play two-player Pong.")
    parser.parse_args(argv)

    import pygame

    key_names = {
        pygame.K_a: "a",
        pygame.K_d: "d",
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption("Pong Game")
        colors = {1: _rgb(PADDLE_1_COLOR), 2: _rgb(PADDLE_2_COLOR)}

        def box(x, y, size):
            rect = pygame.Rect(0, 0, int(size[0]), int(size[1]))
            rect.center = (round(x + WINDOW_WIDTH / 2), round(WINDOW_HEIGHT / 2 - y))
            return rect

        game = PongGame()
        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            held = pygame.key.get_pressed()
            pressed = {name for key, name in key_names.items() if held[key]}
            game.step(dt, pressed)

            screen.fill(_rgb(CLEAR_COLOR))
            for paddle in game.paddles:
                screen.fill(colors.get(paddle.player, (0, 0, 0)), box(paddle.x, paddle.y, PADDLE_SIZE))
            screen.fill(_rgb(BALL_COLOR), box(game.ball.x, game.ball.y, BALL_SIZE))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0