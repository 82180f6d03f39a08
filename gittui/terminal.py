"""Scoped raw-mode handling for the full-screen view."""
from __future__ import annotations
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

from .errors import TerminalError


class RawTerminal:
    """Put stdin in cbreak mode for the life of a `with` block.

    Keys arrive one read at a time without echo; Ctrl+C still raises
    KeyboardInterrupt. The saved attributes are written back on every exit
    path.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._saved = None

    def __enter__(self) -> "RawTerminal":
        if not self.stream.isatty():
            raise TerminalError("stdin is not a terminal")
        try:
            self._fd = self.stream.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"could not enter raw mode: {e}") from e
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        except (termios.error, OSError) as e:
            raise TerminalError(f"could not restore terminal: {e}") from e
        finally:
            self._saved = None

    def read_key(self, timeout: float) -> str:
        """Wait up to `timeout` seconds for input; '' when nothing arrived."""
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return ""
        # One read picks up a whole escape sequence such as ESC [ Z
        return os.read(self._fd, 32).decode("utf-8", errors="replace")
