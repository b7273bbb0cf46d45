"""Detection of denial-of-service patterns in request logs."""

from __future__ import annotations

from collections import deque
from datetime import datetime

_DOS_WINDOW_SECONDS = 2
_MIN_REQUESTS = 5


def _ip_key(ip: str) -> tuple[int, ...]:
    return tuple(int(part) for part in ip.split("."))


class DoSDetector:
    """Flags IPs that send five requests within less than two seconds."""

    def __init__(self) -> None:
        self._recent: dict[str, deque[datetime]] = {}
        self._attackers: dict[str, None] = {}

    def add_visit(self, ip: str, when: datetime) -> None:
        """Record a request from ``ip`` at time ``when``."""
        times = self._recent.get(ip)
        if times is None:
            self._recent[ip] = deque([when])
            return
        if len(times) < _MIN_REQUESTS - 1:
            times.append(when)
            return
        elapsed = (when - times.popleft()).total_seconds()
        times.append(when)
        if elapsed < _DOS_WINDOW_SECONDS:
            self._attackers[ip] = None

    def attackers(self) -> list[str]:
        """Return the flagged IPs in ascending numeric order."""
        return sorted(self._attackers, key=_ip_key)