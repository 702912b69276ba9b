"""Configuration and settings."""

import os

# Progress bar
BAR_WIDTH = 20  # cells
BAR_FILL = "#"
BAR_EMPTY = "-"

# One tick of the loop
TICK_SECONDS = 1.0

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INTERRUPTED = 130  # 128 + SIGINT

# Environment
NO_COLOR = "NO_COLOR" in os.environ  # https://no-color.org
PROFILE_ENV = "SLEEPBAR_CONFIG"

# Longest accepted duration: LONG_MAX on 32-bit, about 68 years
MAX_SECONDS = 2**31 - 1
