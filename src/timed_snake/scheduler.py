"""Fixed-interval gate between host polling and simulation ticks."""

from __future__ import annotations

# Slack for timestamps built by repeatedly adding the interval.
_EPSILON = 1e-9


class TickScheduler:
    """Decides whether a simulation tick is due.

    The host may poll as often as it likes; a tick is due once at least
    ``interval`` seconds have passed since the last one. The gate is a
    plain time comparison and never sleeps.
    """

    def __init__(self, interval: float = 0.1, now: float = 0.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = interval
        self.last_tick = now

    def due(self, now: float) -> bool:
        return now - self.last_tick >= self.interval - _EPSILON

    def poll(self, now: float) -> bool:
        """Return True and move the reference point to *now* if a tick is due."""
        if not self.due(now):
            return False
        self.last_tick = now
        return True

    def reset(self, now: float) -> None:
        self.last_tick = now
