"""Flappy Bird: a bird falls under gravity and must pass through gaps between pipes."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field
from pathlib import Path

WINDOW_WIDTH = 288.0
WINDOW_HEIGHT = 512.0

BIRD_WIDTH = 24.0
BIRD_HEIGHT = 32.0
GRAVITY = -8.0
JUMP_FORCE = 5.0
TILT_FACTOR = 0.05
MIN_ROTATION = -math.pi / 3
MAX_ROTATION = math.pi / 3

PIPE_WIDTH = 52.0
PIPE_HEIGHT = 320.0
PIPE_SPAWN_INTERVAL = 2.0
PIPE_SPEED = -3.0
GAP_HEIGHT = 100.0
GAP_RANGE = 100.0

PIPE_SPAWN_X = WINDOW_WIDTH / 2 + PIPE_WIDTH / 2 + 200.0
PIPE_DESPAWN_X = -WINDOW_WIDTH / 2 - PIPE_WIDTH / 2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its lower-left and upper-right corners."""

    min: tuple[float, float]
    max: tuple[float, float]

    def overlaps(self, other: Rect) -> bool:
        """Return True when the interiors of the two rectangles intersect."""
        return (
            self.min[0] < other.max[0]
            and self.max[0] > other.min[0]
            and self.min[1] < other.max[1]
            and self.max[1] > other.min[1]
        )


def rect_from_center_size(center: tuple[float, float], size: tuple[float, float]) -> Rect:
    """Build a rectangle centred on ``center`` with the given width and height."""
    cx, cy = center
    half_w, half_h = size[0] / 2, size[1] / 2
    return Rect(min=(cx - half_w, cy - half_h), max=(cx + half_w, cy + half_h))


@dataclass
class Bird:
    """The player's bird; ``flapping`` selects the wings-up sprite."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0
    flapping: bool = False

    @property
    def rect(self) -> Rect:
        return rect_from_center_size((self.x, self.y), (BIRD_WIDTH, BIRD_HEIGHT))


@dataclass
class Pipe:
    """One pipe; the upper pipe of a pair is turned upside down."""

    x: float
    y: float
    rotation: float = 0.0
    vx: float = PIPE_SPEED
    vy: float = 0.0

    @property
    def rect(self) -> Rect:
        return rect_from_center_size((self.x, self.y), (PIPE_WIDTH, PIPE_HEIGHT))


def pipe_pair(gap_y: float) -> tuple[Pipe, Pipe]:
    """Return the lower and upper pipe framing a gap centred at ``gap_y``."""
    lower = Pipe(x=PIPE_SPAWN_X, y=gap_y - GAP_HEIGHT / 2 - PIPE_HEIGHT / 2)
    upper = Pipe(
        x=PIPE_SPAWN_X,
        y=gap_y + GAP_HEIGHT / 2 + PIPE_HEIGHT / 2,
        rotation=math.pi,
    )
    return lower, upper


@dataclass
class FlappyGame:
    """World state of a Flappy Bird game, advanced one frame at a time."""

    rng: random.Random = field(default_factory=random.Random)
    bird: Bird = field(default_factory=Bird)
    pipes: list[Pipe] = field(default_factory=list)
    _timer_elapsed: float = 0.0

    def jump(self) -> None:
        """Give the bird an upward kick and show its wings raised."""
        self.bird.vy = JUMP_FORCE
        self.bird.flapping = True

    def update_bird(self, dt: float) -> None:
        """Apply gravity, move the bird by its velocity and tilt it."""
        bird = self.bird
        bird.vy += GRAVITY * dt
        # Position advances by the raw velocity each frame, not scaled by dt.
        bird.x += bird.vx
        bird.y += bird.vy
        bird.flapping = False
        bird.rotation = min(max(bird.vy * TILT_FACTOR, MIN_ROTATION), MAX_ROTATION)

    def spawn_pipes(self, dt: float) -> tuple[Pipe, Pipe] | None:
        """Tick the repeating spawn timer; spawn and return a pair when it fires."""
        self._timer_elapsed += dt
        if self._timer_elapsed < PIPE_SPAWN_INTERVAL:
            return None
        self._timer_elapsed %= PIPE_SPAWN_INTERVAL
        gap_y = -GAP_RANGE + 2 * GAP_RANGE * self.rng.random()
        pair = pipe_pair(gap_y)
        self.pipes.extend(pair)
        return pair

    def move_pipes(self) -> None:
        """Move every pipe by its velocity."""
        for pipe in self.pipes:
            pipe.x += pipe.vx
            pipe.y += pipe.vy

    def despawn_pipes(self) -> None:
        """Drop pipes that have scrolled fully past the left edge."""
        self.pipes = [pipe for pipe in self.pipes if pipe.x >= PIPE_DESPAWN_X]

    def bird_collides(self) -> bool:
        """Return True if the bird hits a pipe or a window edge.

        The edge check is made per pipe, so with no pipes on screen the bird
        cannot die by leaving the window.
        """
        bird_rect = self.bird.rect
        bottom = self.bird.y - BIRD_HEIGHT / 2
        top = self.bird.y + BIRD_HEIGHT / 2
        out_of_bounds = bottom <= -WINDOW_HEIGHT / 2 or top >= WINDOW_HEIGHT / 2
        return any(out_of_bounds or bird_rect.overlaps(pipe.rect) for pipe in self.pipes)

    def step(self, dt: float, jump_pressed: bool) -> bool:
        """Advance one frame; return False once the game is over."""
        self.update_bird(dt)
        if jump_pressed:
            self.jump()
        self.spawn_pipes(dt)
        self.move_pipes()
        self.despawn_pipes()
        return not self.bird_collides()


def _load_image(pygame, directory: Path, name: str, size, color):
    path = directory / name
    if path.is_file():
        return pygame.image.load(str(path)).convert_alpha()
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    return surface


def main(argv=None) -> int:
    """Open a window and play Flappy Bird until the bird crashes or the window closes."""
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument("--assets", default="assets", help="directory holding the sprite images")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption("Flappy Bird")
        assets = Path(args.assets)
        background = _load_image(
            pygame, assets, "background.png", (int(WINDOW_WIDTH), int(WINDOW_HEIGHT)), (112, 197, 206)
        )
        pipe_image = _load_image(
            pygame, assets, "pipe.png", (int(PIPE_WIDTH), int(PIPE_HEIGHT)), (84, 168, 60)
        )
        bird_down = _load_image(
            pygame, assets, "bird-down.png", (int(BIRD_WIDTH), int(BIRD_HEIGHT)), (240, 200, 40)
        )
        bird_up = _load_image(
            pygame, assets, "bird-up.png", (int(BIRD_WIDTH), int(BIRD_HEIGHT)), (250, 220, 90)
        )

        def blit_centered(image, x, y, rotation):
            if rotation:
                image = pygame.transform.rotate(image, math.degrees(rotation))
            rect = image.get_rect(center=(x + WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - y))
            screen.blit(image, rect)

        game = FlappyGame()
        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            jump_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    jump_pressed = True
            if not running:
                break
            running = game.step(dt, jump_pressed)

            blit_centered(background, 0.0, 0.0, 0.0)
            for pipe in game.pipes:
                blit_centered(pipe_image, pipe.x, pipe.y, pipe.rotation)
            bird = game.bird
            blit_centered(bird_up if bird.flapping else bird_down, bird.x, bird.y, bird.rotation)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0