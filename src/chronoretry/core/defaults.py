r"""Default values of a retry policy."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_JITTER_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MULTIPLIER",
]

# Total number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Delay in seconds before the first retry
# Exponential: 1st retry waits 0.1s, 2nd waits 0.2s, 3rd waits 0.4s
DEFAULT_BASE_DELAY = 0.1

DEFAULT_MULTIPLIER = 2.0

# Upper bound in seconds of the delay before jitter is applied
DEFAULT_MAX_DELAY = 10.0

# 0.0 disables jitter, 1.0 draws the delay uniformly from [0, delay]
DEFAULT_JITTER_FACTOR = 0.1
