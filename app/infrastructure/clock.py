"""
System clock adapter for the Clock port.
"""

from datetime import datetime


class SystemClock:
    """Reads the host's local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()
