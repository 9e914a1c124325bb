from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current local instant.

    Services and analytics take a Clock instead of calling ``datetime.now()``
    so tests can pin time.
    """

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()
