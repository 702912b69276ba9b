#!/usr/bin/env python3
"""sleepbar CLI - sleep for N seconds with a progress readout."""

import argparse
import os
import sys

from ticker import loop, ui
from ticker.config import EXIT_USAGE, MAX_SECONDS, PROFILE_ENV
from ticker.models import RenderMode, UsageError

from . import __version__
from .profile import load_profile


class ArgumentParser(argparse.ArgumentParser):
    """argparse, but usage errors exit with status 1 instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        ui.print_error(message)
        sys.exit(EXIT_USAGE)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="sleepbar",
        description="Sleep for a number of seconds, showing elapsed and remaining time.",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"sleepbar {__version__}",
    )
    parser.add_argument(
        "seconds",
        help="How long to sleep (non-negative integer)",
    )
    # Anything after the first positional is ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "--multiline",
        action="store_true",
        default=None,
        help="Print a new line per tick instead of updating one line",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=None,
        help="Only print the header and the final message",
    )
    parser.add_argument(
        "--no-bar",
        dest="bar",
        action="store_false",
        default=None,
        help="Hide the progress bar",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off (default: on for terminals)",
    )
    parser.add_argument(
        "--no-clock",
        dest="show_clock",
        action="store_false",
        default=None,
        help="Leave start and ETA times out of the header",
    )
    parser.add_argument(
        "--bar-width",
        type=positive_int,
        default=None,
        metavar="N",
        help="Progress bar width in cells (default: 20)",
    )
    parser.add_argument(
        "--config",
        default=os.environ.get(PROFILE_ENV),
        metavar="FILE",
        help=f"YAML profile with default options (default: ${PROFILE_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {text!r}")
    return value


def parse_seconds(text: str) -> int:
    """Parse the duration argument. Raises UsageError unless it is an integer >= 0."""
    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    # ASCII digits only: no "1_000", no full-width or other Unicode digits
    if not (digits.isascii() and digits.isdigit()):
        raise UsageError("<seconds> must be a non-negative integer.")
    seconds = int(digits)
    if seconds > MAX_SECONDS:
        raise UsageError(f"<seconds> must be at most {MAX_SECONDS}.")
    return seconds


def build_mode(args: argparse.Namespace) -> RenderMode:
    """Combine profile defaults with command-line flags."""
    profile = load_profile(args.config)
    options = profile.merge(
        multiline=args.multiline,
        quiet=args.quiet,
        bar=args.bar,
        color=args.color,
        bar_width=args.bar_width,
        show_clock=args.show_clock,
    )
    options.setdefault("color", ui.color_default())
    return RenderMode(**options)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    loop.DEBUG = args.debug
    if args.extra:
        loop.debug(f"ignoring extra arguments: {args.extra}")

    try:
        total = parse_seconds(args.seconds)
        mode = build_mode(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        ui.print_error(str(e))
        return EXIT_USAGE

    return loop.run_timer(total, mode)


if __name__ == "__main__":
    sys.exit(main())
