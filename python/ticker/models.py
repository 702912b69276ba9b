"""Data classes for the tick loop."""

from dataclasses import dataclass

from .config import BAR_WIDTH


class UsageError(ValueError):
    """Bad command-line input or profile; reported before the loop starts."""


class Interrupted(Exception):
    """The user interrupted the loop at a checkpoint."""

    def __init__(self, elapsed: int, total: int):
        super().__init__(f"Interrupted at {elapsed}/{total} seconds.")
        self.elapsed = elapsed
        self.total = total


@dataclass(frozen=True)
class RenderMode:
    """How progress is drawn. Chosen once per run."""
    multiline: bool = False  # append a line per tick instead of overwriting
    quiet: bool = False  # header and final message only
    bar: bool = True
    color: bool = False
    bar_width: int = BAR_WIDTH
    show_clock: bool = True  # start/ETA in the header

    def __post_init__(self):
        if self.bar_width <= 0:
            raise UsageError("bar width must be a positive integer")


@dataclass
class Progress:
    """Where the loop is. `elapsed` only ever grows, one tick at a time."""
    total: int
    elapsed: int = 0

    def __post_init__(self):
        if self.total < 0:
            raise UsageError("<seconds> must be a non-negative integer.")

    @property
    def remaining(self) -> int:
        return self.total - self.elapsed

    @property
    def done(self) -> bool:
        return self.elapsed >= self.total

    @property
    def fraction(self) -> float:
        # An empty countdown is complete from the start.
        if self.total == 0:
            return 1.0
        return self.elapsed / self.total

    @property
    def percent(self) -> int:
        return round(self.fraction * 100)

    def filled(self, width: int) -> int:
        """Number of bar cells to fill out of `width`."""
        if self.total == 0:
            return width
        # floor(fraction * width) without float rounding
        return self.elapsed * width // self.total

    def advance(self) -> int:
        if self.done:
            raise ValueError(f"already at {self.total}/{self.total}")
        self.elapsed += 1
        return self.elapsed
