"""Headless tile-game building blocks: render queue, input events and text, memory and line helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "events",
    "memory",
    "nextline",
    "renderqueue",
    "strings",
]