"""Coloured terminal messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"
_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
_TICK_SECONDS = 0.1


def _style(code: str, text: object) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` rendered in bold."""
    return _style("1", text)


def red(text: object) -> str:
    """Return ``text`` rendered in red."""
    return _style("31", text)


def green(text: object) -> str:
    """Return ``text`` rendered in green."""
    return _style("32", text)


def blue(text: object) -> str:
    """Return ``text`` rendered in blue."""
    return _style("34", text)


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a red warning line."""
    mark = "!" if _no_emoji() else "⚠️ "
    print(f"{red(mark)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    mark = "✓" if _no_emoji() else "✅"
    print(f"{green(mark)} {green(message)}")


class Spinner:
    """A spinner with a message, redrawn on stderr while work is in progress."""

    def __init__(self, message: str) -> None:
        self._message = message
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._finished = False
        self._stream = sys.stderr
        isatty = getattr(self._stream, "isatty", None)
        self._drawing = bool(isatty and isatty())
        self._thread: threading.Thread | None = None
        if self._drawing:
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    @property
    def finished(self) -> bool:
        return self._finished

    def set_message(self, message: str) -> None:
        """Replace the message shown next to the spinner."""
        with self._lock:
            self._message = message

    def _spin(self) -> None:
        for frame in itertools.cycle(_SPINNER_FRAMES):
            if self._stop.wait(_TICK_SECONDS):
                return
            with self._lock:
                self._stream.write(f"\r\x1b[2K{frame} {self._message}")
            self._stream.flush()

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        if self._finished:
            return
        self._finished = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        if self._drawing:
            self._stream.write("\r\x1b[2K")
            self._stream.flush()

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, *args: object) -> None:
        self.finish_and_clear()