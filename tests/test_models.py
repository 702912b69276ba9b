"""Unit tests for Progress and RenderMode."""
from __future__ import annotations

import pytest

from ticker.models import Interrupted, Progress, RenderMode, UsageError


def test_progress_starts_at_zero():
    """A new Progress has nothing elapsed and everything remaining."""
    p = Progress(5)
    assert p.elapsed == 0
    assert p.remaining == 5
    assert p.fraction == 0.0
    assert p.percent == 0
    assert not p.done


def test_advance_counts_up_by_one():
    """advance() moves elapsed by exactly one and remaining follows."""
    p = Progress(3)
    assert p.advance() == 1
    assert p.advance() == 2
    assert p.remaining == 1
    assert p.advance() == 3
    assert p.done
    assert p.remaining == 0


def test_advance_past_total_raises():
    """elapsed never exceeds total."""
    p = Progress(1)
    p.advance()
    with pytest.raises(ValueError):
        p.advance()


def test_zero_total_is_complete():
    """An empty countdown is done immediately and counts as 100%."""
    p = Progress(0)
    assert p.done
    assert p.fraction == 1.0
    assert p.percent == 100
    assert p.filled(20) == 20


def test_negative_total_rejected():
    """A negative duration is a usage error."""
    with pytest.raises(UsageError):
        Progress(-1)


def test_percent_rounds():
    """Percent is the fraction rounded to a whole number."""
    p = Progress(3, elapsed=1)
    assert p.percent == 33
    p = Progress(3, elapsed=2)
    assert p.percent == 67


def test_bar_fill_endpoints():
    """Empty at the start, full width at the end."""
    assert Progress(7, elapsed=0).filled(20) == 0
    assert Progress(7, elapsed=7).filled(20) == 20


def test_bar_fill_floors():
    """Filled cells are floor(fraction * width)."""
    assert Progress(3, elapsed=1).filled(20) == 6
    assert Progress(3, elapsed=2).filled(20) == 13
    assert Progress(10, elapsed=7).filled(20) == 14


@pytest.mark.parametrize("total", [1, 2, 3, 7, 19, 20, 21, 60, 333])
def test_bar_fill_monotonic(total):
    """Bar fill never shrinks as time passes."""
    fills = [Progress(total, elapsed=e).filled(20) for e in range(total + 1)]
    assert fills == sorted(fills)
    assert fills[0] == 0
    assert fills[-1] == 20


def test_render_mode_defaults():
    """Default mode: single line, bar on, 20 cells, clock in header."""
    mode = RenderMode()
    assert not mode.multiline
    assert not mode.quiet
    assert mode.bar
    assert mode.bar_width == 20
    assert mode.show_clock


def test_render_mode_rejects_bad_width():
    """The bar needs at least one cell."""
    with pytest.raises(UsageError):
        RenderMode(bar_width=0)


def test_interrupted_carries_snapshot():
    """Interrupted remembers where the loop stopped."""
    e = Interrupted(2, 5)
    assert e.elapsed == 2
    assert e.total == 5
    assert str(e) == "Interrupted at 2/5 seconds."
