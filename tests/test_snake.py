import random

import pytest

from arcadetrio.snake import (
    DOWN,
    FOOD_START_POSITION,
    LEFT,
    RIGHT,
    SNAKE_SIZE,
    SNAKE_SPEED,
    UP,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    SnakeGame,
)


def make_game(**kwargs):
    return SnakeGame(rng=random.Random(1234), **kwargs)


def test_initial_state():
    game = make_game()
    assert game.direction == RIGHT
    assert game.segments == [(0.0, 0.0), (-SNAKE_SIZE[0], 0.0), (-2 * SNAKE_SIZE[0], 0.0)]
    assert game.food == [FOOD_START_POSITION]


@pytest.mark.parametrize(
    "start, key, expected",
    [
        (RIGHT, "up", UP),
        (RIGHT, "down", DOWN),
        (RIGHT, "left", RIGHT),
        (UP, "down", UP),
        (UP, "left", LEFT),
        (DOWN, "up", DOWN),
        (LEFT, "right", LEFT),
        (UP, "right", RIGHT),
    ],
)
def test_handle_input_turns_but_never_reverses(start, key, expected):
    game = make_game(direction=start)
    game.handle_input({key})
    assert game.direction == expected


def test_handle_input_priority_order():
    game = make_game(direction=RIGHT)
    game.handle_input({"left", "down", "up"})
    assert game.direction == UP


def test_handle_input_falls_through_to_allowed_key():
    game = make_game(direction=UP)
    game.handle_input({"down", "left"})
    assert game.direction == LEFT


def test_no_keys_keeps_direction():
    game = make_game(direction=LEFT)
    game.handle_input(set())
    assert game.direction == LEFT


def test_move_body_follows_head():
    game = make_game()
    before = list(game.segments)
    game.move(0.05)
    assert game.segments[1:] == before[:-1]
    assert game.head[0] == pytest.approx(before[0][0] + SNAKE_SPEED * 0.05)
    assert game.head[1] == pytest.approx(before[0][1])
    assert len(game.segments) == len(before)


def test_move_up():
    game = make_game(direction=UP)
    game.move(0.1)
    assert game.head[0] == pytest.approx(0.0)
    assert game.head[1] == pytest.approx(SNAKE_SPEED * 0.1)


def test_eat_food_grows_and_respawns():
    game = make_game(food=[(3.0, 0.0)])
    tail = game.segments[-1]
    eaten = game.eat_food()
    assert eaten == 1
    assert len(game.segments) == 4
    assert game.segments[-1] == tail
    assert len(game.food) == 1
    assert game.food[0] != (3.0, 0.0)


def test_eat_food_misses_distant_food():
    game = make_game()
    assert game.eat_food() == 0
    assert game.food == [FOOD_START_POSITION]
    assert len(game.segments) == 3


def test_food_at_exact_eat_distance_is_not_eaten():
    game = make_game(food=[(SNAKE_SIZE[0], 0.0)])
    assert game.eat_food() == 0


def test_eating_two_foods_grows_once():
    game = make_game(food=[(1.0, 0.0), (-1.0, 0.0)])
    assert game.eat_food() == 2
    assert len(game.segments) == 4
    assert len(game.food) == 2


def test_spawn_food_inside_window():
    game = make_game(food=[])
    for _ in range(200):
        x, y = game.spawn_food()
        assert -WINDOW_WIDTH / 2 <= x < WINDOW_WIDTH / 2
        assert -WINDOW_HEIGHT / 2 <= y < WINDOW_HEIGHT / 2
    assert len(game.food) == 200


def test_spawn_food_reproducible_with_seed():
    a = SnakeGame(rng=random.Random(7), food=[])
    b = SnakeGame(rng=random.Random(7), food=[])
    assert a.spawn_food() == b.spawn_food()


def test_short_snake_never_collides():
    game = make_game(segments=[(0.0, 0.0), (0.0, 0.0), (0.0, 0.0)])
    assert game.self_collision() is False


def test_self_collision_detected():
    segments = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (1.0, 1.0)]
    game = make_game(segments=segments)
    assert game.self_collision() is True


def test_no_self_collision_when_spread_out():
    segments = [(0.0, 0.0), (-10.0, 0.0), (-20.0, 0.0), (-30.0, 0.0)]
    game = make_game(segments=segments)
    assert game.self_collision() is False


def test_step_runs_without_collision_initially():
    game = make_game()
    assert game.step(0.05, {"up"}) is True
    assert game.direction == UP
    assert game.head[1] == pytest.approx(SNAKE_SPEED * 0.05)


def test_step_reports_collision():
    segments = [(0.0, 0.0), (10.0, 0.0), (10.0, -10.0), (0.0, -10.0), (-10.0, -10.0)]
    game = make_game(segments=segments, direction=DOWN, food=[(300.0, 200.0)])
    # Moving down by 5 units puts the head within bite distance of (0, -10).
    assert game.step(0.025, set()) is False