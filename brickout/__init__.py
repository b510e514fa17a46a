"""A terminal brick-breaking game with ANSI screen, keyboard and timer helpers."""

__version__ = "0.1.0"
__all__ = ["screen", "keyboard", "timer", "game"]