"""Flappy Bird, Pong and Snake as small pygame arcade games with frame-by-frame game logic."""

__version__ = "0.1.0"
__all__ = ["flappy", "pong", "snake"]