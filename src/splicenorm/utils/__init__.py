"""Utility functions for splicenorm.

- Logging configuration
- Timing

Example:
    >>> from splicenorm.utils import setup_logging
    >>> setup_logging(verbosity=2)
"""

from splicenorm.utils.logging import Timer, setup_logging

__all__ = [
    "Timer",
    "setup_logging",
]
