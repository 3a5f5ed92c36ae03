"""Core game logic for a side-scrolling platformer: palette, random numbers,
input bindings and recording, replays, scoring and entity management."""

__version__ = "0.1.0"

__all__ = ["controls", "input", "palette", "replay", "rng", "score", "world"]