"""Terminal UI helpers with colors and formatting."""

import sys
from datetime import datetime, timedelta

from . import config
from .config import BAR_EMPTY, BAR_FILL
from .models import Progress, RenderMode

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

# Colors
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"

CLEAR_LINE = "\r\033[K"


def color_default(stream=None) -> bool:
    """Color only for a real terminal, and never when NO_COLOR is set."""
    stream = stream or sys.stdout
    if config.NO_COLOR:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, *codes: str, color: bool = True) -> str:
    """Wrap text in ANSI codes, or return it unchanged when color is off."""
    if not color or not codes:
        return text
    return "".join(codes) + text + RESET


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def format_duration(seconds: int) -> str:
    """3 -> '3s', 65 -> '1m 05s', 7384 -> '2h 03m 04s'."""
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h {minutes:02d}m {secs:02d}s"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M:%S")


def render_bar(progress: Progress, mode: RenderMode) -> str:
    """Bar plus percentage, e.g. '[########------------]  40%'."""
    filled = progress.filled(mode.bar_width)
    done = paint(BAR_FILL * filled, GREEN, color=mode.color)
    todo = paint(BAR_EMPTY * (mode.bar_width - filled), DIM, color=mode.color)
    percent = paint(f"{progress.percent:3d}%", BOLD, color=mode.color)
    return f"[{done}{todo}] {percent}"


def render_line(progress: Progress, mode: RenderMode) -> str:
    """The per-tick status line."""
    elapsed = paint(format_duration(progress.elapsed), CYAN, color=mode.color)
    remaining = paint(format_duration(progress.remaining), YELLOW, color=mode.color)
    line = f"Elapsed: {elapsed} | Remaining: {remaining}"
    if mode.bar:
        line += " " + render_bar(progress, mode)
    return line


def render_header(total: int, mode: RenderMode, started: datetime | None = None) -> str:
    header = paint(f"Sleeping for {plural(total, 'second')}...", BOLD, color=mode.color)
    if mode.show_clock and started is not None:
        try:
            eta = format_clock(started + timedelta(seconds=total))
        except OverflowError:
            eta = "never"
        clock = f"(started {format_clock(started)}, ETA {eta})"
        header += " " + paint(clock, DIM, color=mode.color)
    return header


def print_header(total: int, mode: RenderMode, started: datetime | None = None):
    """Print the one-time header line."""
    print(render_header(total, mode, started), flush=True)


def print_tick(progress: Progress, mode: RenderMode):
    """Draw progress, overwriting the current line unless in multiline mode."""
    line = render_line(progress, mode)
    if mode.multiline:
        sys.stdout.write(line + "\n")
    else:
        sys.stdout.write(CLEAR_LINE + line)
    sys.stdout.flush()


def end_line():
    """Finish an open single-line render."""
    sys.stdout.write("\n")
    sys.stdout.flush()


def print_done(total: int, mode: RenderMode):
    """Print the completion notice."""
    print(paint(f"Done... Total time: {format_duration(total)}", GREEN, color=mode.color))


def print_interrupted(progress: Progress, mode: RenderMode):
    """Report where the loop was interrupted, on stderr."""
    msg = f"Interrupted at {progress.elapsed}/{progress.total} seconds."
    print(paint(msg, YELLOW, BOLD, color=mode.color), file=sys.stderr)


def print_system(msg: str, color: bool = False):
    """Print a system message."""
    print(paint(f"[System]: {msg}", DIM, color=color), file=sys.stderr)


def print_error(msg: str, color: bool = False):
    """Print an error message."""
    print(paint(f"Error: {msg}", RED, BOLD, color=color), file=sys.stderr)
