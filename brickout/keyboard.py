"""Non-blocking single-key input from a terminal."""

from __future__ import annotations

import os
import termios

_LFLAG = 3
_CC = 6


class Keyboard:
    """Puts a terminal into raw mode and reads single keys from it."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._initial: list | None = None
        self._raw: list | None = None
        self._peek: int | None = None

    def __enter__(self) -> "Keyboard":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def init(self) -> None:
        """Turn off line buffering, echo and signal keys."""
        self._initial = termios.tcgetattr(self.fd)
        raw = termios.tcgetattr(self.fd)
        raw[_LFLAG] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        raw[_CC][termios.VMIN] = 1
        raw[_CC][termios.VTIME] = 0
        self._raw = raw
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)

    def destroy(self) -> None:
        """Restore the terminal settings saved by init."""
        if self._initial is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._initial)

    def _settings(self) -> list:
        if self._raw is None:
            self._raw = termios.tcgetattr(self.fd)
        return self._raw

    def keyhit(self) -> bool:
        """Return True if a key is waiting, without blocking."""
        if self._peek is not None:
            return True

        settings = self._settings()
        settings[_CC][termios.VMIN] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, settings)
        try:
            data = os.read(self.fd, 1)
        finally:
            settings[_CC][termios.VMIN] = 1
            termios.tcsetattr(self.fd, termios.TCSANOW, settings)

        if len(data) == 1:
            self._peek = data[0]
            return True
        return False

    def readch(self) -> int:
        """Return the next key's byte value, blocking until one arrives."""
        if self._peek is not None:
            ch, self._peek = self._peek, None
            return ch
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("no more input")
        return data[0]