"""Ticker - interruptible one-second countdown loop."""

__version__ = "0.1.0"
