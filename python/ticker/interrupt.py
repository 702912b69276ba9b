"""Interrupt delivery: a set-once token and the OS signal sources that set it."""

import signal
import sys
import threading

from . import ui


class InterruptToken:
    """Set once by an interrupt source, read by the loop, never cleared."""

    def __init__(self):
        self._event = threading.Event()

    def set(self):
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Sleep up to `timeout` seconds, returning early once the token is set.

        Returns True if the token is set.
        """
        return self._event.wait(timeout)


class InterruptSource:
    """Maps the user's interrupt gesture onto an InterruptToken."""

    signals: tuple[str, ...] = ()

    def __init__(self, token: InterruptToken):
        self.token = token
        self._previous: dict[int, object] = {}

    def _handle(self, signum, frame):
        self.token.set()

    def install(self):
        """Route this source's signals to the token."""
        for name in self.signals:
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            try:
                self._previous[signum] = signal.signal(signum, self._handle)
            except (ValueError, OSError) as e:
                # Not on the main thread, or the platform refused it
                ui.print_system(f"Cannot handle {name}: {e}")

    def uninstall(self):
        """Put back whatever handlers were there before install()."""
        for signum, handler in self._previous.items():
            # None means the old handler was not installed from Python
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)
        self._previous.clear()

    def is_set(self) -> bool:
        return self.token.is_set()


class PosixInterruptSource(InterruptSource):
    """Ctrl-C arrives as SIGINT."""
    signals = ("SIGINT",)


class WindowsInterruptSource(InterruptSource):
    """Console control events: Ctrl-C as SIGINT, Ctrl-Break as SIGBREAK."""
    signals = ("SIGINT", "SIGBREAK")


def default_source(token: InterruptToken) -> InterruptSource:
    """Pick the interrupt source for the running platform."""
    if sys.platform == "win32":
        return WindowsInterruptSource(token)
    return PosixInterruptSource(token)
