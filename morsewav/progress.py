"""A terminal progress line with ETA for long renders."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

_GREEN = "\033[92m"
_RESET = "\033[0m"


class Progress:
    """Progress indicator written to a terminal stream; silent otherwise."""

    def __init__(
        self,
        total: int,
        quiet: bool = False,
        *,
        stream: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.total = total
        self.current = 0
        self._stream = stream if stream is not None else sys.stderr
        self._clock = clock
        isatty = getattr(self._stream, "isatty", None)
        self.enabled = not quiet and bool(isatty and isatty())
        self._start = clock()
        if self.enabled:
            self._emit(f"[0/{total}]")

    def _emit(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def _elapsed(self) -> float:
        return self._clock() - self._start

    def update(self, pos: int) -> None:
        """Report that pos of total items are done."""
        if not self.enabled or pos == self.current:
            return
        self.current = pos

        elapsed = self._elapsed()
        eta = elapsed * (self.total / pos - 1.0) if self.total and pos else 0.0
        percent = int(100.0 * pos / self.total + 0.5) if self.total else 0

        head = f"\r{_GREEN}{percent:3d}%{_RESET} [{pos}/{self.total}]"
        if eta < 1.0:
            ms = int(eta * 1000 + 0.5)
            self._emit(f"{head} ETA {ms:3d} ms")
        else:
            mins = int(eta / 60)
            secs = int(eta) % 60
            self._emit(f"{head} ETA {mins:02d}:{secs:02d}")

    def finish(self) -> None:
        """Print the final line with the total elapsed time."""
        if not self.enabled:
            return
        elapsed = self._elapsed()
        line = f"\r{_GREEN}100%{_RESET} [{self.total}/{self.total}] Done"
        if elapsed < 1.0:
            ms = int(elapsed * 1000 + 0.5)
            line += f" | Elapsed {ms} ms\n"
        else:
            hrs = int(elapsed / 3600)
            mins = int(elapsed / 60) % 60
            secs = int(elapsed) % 60
            line += f" | Elapsed {hrs:02d}:{mins:02d}:{secs:02d}\n"
        self._emit(line)