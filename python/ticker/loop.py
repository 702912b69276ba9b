"""TickLoop - the interruptible countdown and its render policy."""

import sys
from datetime import datetime
from typing import Callable

from .config import EXIT_INTERRUPTED, EXIT_OK, TICK_SECONDS
from .interrupt import InterruptSource, InterruptToken, default_source
from .models import Interrupted, Progress, RenderMode
from . import ui

# Debug flag - set by the sleepbar CLI
DEBUG = False


def debug(msg: str):
    """Print debug message if DEBUG is enabled."""
    if DEBUG:
        print(f"  [debug] {msg}", file=sys.stderr)


class TickLoop:
    """Counts from 0 to `total` one second at a time.

    Use as a context manager to have the interrupt source installed for
    the duration of the run:

        with TickLoop(10, mode, token) as loop:
            code = loop.run()

    `sleep` and `now` can be swapped out; `sleep(seconds)` must return
    early once the token is set.
    """

    def __init__(
        self,
        total: int,
        mode: RenderMode,
        token: InterruptToken,
        source: InterruptSource | None = None,
        sleep: Callable[[float], object] | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.progress = Progress(total)
        self.mode = mode
        self.token = token
        self.source = source
        self.sleep = sleep or token.wait
        self.now = now
        self.waits = 0
        self._line_open = False

    def __enter__(self):
        """Start listening for interrupts."""
        if self.source:
            self.source.install()
        return self

    def __exit__(self, *args):
        """Restore the previous interrupt handlers."""
        if self.source:
            self.source.uninstall()

    def run(self) -> int:
        """Run to completion or interruption. Returns the exit status."""
        total = self.progress.total
        ui.print_header(total, self.mode, started=self.now())
        debug(f"mode={self.mode}")

        try:
            self._main_loop()
        except Interrupted:
            debug(f"interrupted after {self.waits} wait(s)")
            self._end_line()
            ui.print_interrupted(self.progress, self.mode)
            return EXIT_INTERRUPTED

        self._end_line()
        ui.print_done(total, self.mode)
        return EXIT_OK

    def _main_loop(self):
        progress = self.progress
        while True:
            self._render()
            if progress.done:
                break

            self._checkpoint()
            self.sleep(TICK_SECONDS)
            self.waits += 1
            self._checkpoint()

            progress.advance()
            debug(f"tick {progress.elapsed}/{progress.total}")

    def _checkpoint(self):
        if self.token.is_set():
            raise Interrupted(self.progress.elapsed, self.progress.total)

    def _render(self):
        if self.mode.quiet:
            return
        ui.print_tick(self.progress, self.mode)
        self._line_open = not self.mode.multiline

    def _end_line(self):
        if self._line_open:
            ui.end_line()
            self._line_open = False


def run_timer(total: int, mode: RenderMode) -> int:
    """Count down `total` seconds on the terminal. Returns the exit status."""
    token = InterruptToken()
    with TickLoop(total, mode, token, source=default_source(token)) as loop:
        return loop.run()
