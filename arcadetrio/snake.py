"""Snake: steer a growing snake around the window, eating food without biting itself."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Collection
from dataclasses import dataclass, field

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0

FOOD_SIZE = (10.0, 10.0)
FOOD_START_POSITION = (50.0, 50.0)
FOOD_COLOR = (0.7, 0.3, 0.3)

SNAKE_SIZE = (10.0, 10.0)
SNAKE_COLOR = (0.3, 0.3, 0.7)
SNAKE_SPEED = 200.0
SNAKE_START_LENGTH = 3

CLEAR_COLOR = (0.9, 0.9, 0.9)

UP = (0.0, 1.0)
DOWN = (0.0, -1.0)
LEFT = (-1.0, 0.0)
RIGHT = (1.0, 0.0)

# Held keys are checked in this order; the first one allowed wins.
# Each entry is (key name, new direction, direction it may not reverse).
_KEY_DIRECTIONS = (
    ("up", UP, DOWN),
    ("down", DOWN, UP),
    ("left", LEFT, RIGHT),
    ("right", RIGHT, LEFT),
)

EAT_DISTANCE = SNAKE_SIZE[0] / 2 + FOOD_SIZE[0] / 2
BITE_DISTANCE = SNAKE_SIZE[0] / 2

Point = tuple[float, float]


def _start_segments() -> list[Point]:
    return [(-i * SNAKE_SIZE[0], 0.0) for i in range(SNAKE_START_LENGTH)]


def _start_food() -> list[Point]:
    return [FOOD_START_POSITION]


@dataclass
class SnakeGame:
    """World state of a Snake game, advanced one frame at a time.

    ``segments`` holds segment centres from head to tail.
    """

    rng: random.Random = field(default_factory=random.Random)
    direction: Point = RIGHT
    segments: list[Point] = field(default_factory=_start_segments)
    food: list[Point] = field(default_factory=_start_food)

    @property
    def head(self) -> Point:
        return self.segments[0]

    def handle_input(self, pressed: Collection[str]) -> None:
        """Turn according to the held arrow keys, never straight back."""
        for key, new_direction, forbidden in _KEY_DIRECTIONS:
            if key in pressed and self.direction != forbidden:
                self.direction = new_direction
                return

    def move(self, dt: float) -> None:
        """Advance the head; every other segment takes its predecessor's place."""
        previous = list(self.segments)
        hx, hy = previous[0]
        dx, dy = self.direction
        step = SNAKE_SPEED * dt
        self.segments = [(hx + dx * step, hy + dy * step), *previous[:-1]]

    def eat_food(self) -> int:
        """Eat every food the head touches; return how many were eaten.

        Each eaten food is replaced by a new one at a random spot. The snake
        grows by one segment, placed on its tail, at most once per call.
        """
        head = self.head
        eaten = 0
        grown = False
        for food in list(self.food):
            if math.dist(head, food) < EAT_DISTANCE:
                self.food.remove(food)
                eaten += 1
                if not grown:
                    self.segments.append(self.segments[-1])
                    grown = True
                self.spawn_food()
        return eaten

    def spawn_food(self) -> Point:
        """Place a new food at a random position inside the window and return it."""
        x = -WINDOW_WIDTH / 2 + WINDOW_WIDTH * self.rng.random()
        y = -WINDOW_HEIGHT / 2 + WINDOW_HEIGHT * self.rng.random()
        position = (x, y)
        self.food.append(position)
        return position

    def self_collision(self) -> bool:
        """Return True when the head overlaps its own body.

        A snake shorter than four segments never collides with itself.
        """
        if len(self.segments) < 4:
            return False
        head = self.head
        return any(math.dist(head, segment) < BITE_DISTANCE for segment in self.segments[1:])

    def step(self, dt: float, pressed: Collection[str]) -> bool:
        """Advance one frame; return False once the snake has bitten itself."""
        self.handle_input(pressed)
        self.move(dt)
        self.eat_food()
        return not self.self_collision()


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(c * 255) for c in color)  # type: ignore[return-value]


def main(argv=None) -> int:
    """Open a window and play Snake until the snake bites itself or the window closes."""
    parser = argparse.ArgumentParser(prog="snake", description="Play Snake.")
    parser.parse_args(argv)

    import pygame

    key_names = {
        pygame.K_UP: "up",
        pygame.K_DOWN: "down",
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption("Snake Game")

        def box(point, size):
            rect = pygame.Rect(0, 0, int(size[0]), int(size[1]))
            rect.center = (round(point[0] + WINDOW_WIDTH / 2), round(WINDOW_HEIGHT / 2 - point[1]))
            return rect

        game = SnakeGame()
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
            running = game.step(dt, pressed)

            screen.fill(_rgb(CLEAR_COLOR))
            for food in game.food:
                screen.fill(_rgb(FOOD_COLOR), box(food, FOOD_SIZE))
            for segment in game.segments:
                screen.fill(_rgb(SNAKE_COLOR), box(segment, SNAKE_SIZE))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0