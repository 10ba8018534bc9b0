"""Lania - a small task-tracking assistant for the console and Matrix."""

__version__ = "0.1.0"
