"""Progress observer that reports pipeline phases through ``logging``."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class LoggingProgressReporter:
    """Concrete ``ProgressObserver`` writing one log line per phase."""

    def __init__(self, label: str = "", level: int = logging.INFO) -> None:
        self._label = label
        self._level = level
        self._started = time.monotonic()

    def phase(self, message: str) -> None:
        logger.log(self._level, "%s[%6.2fs] %s", self._prefix, self._elapsed(), message)

    def finished(self, message: str) -> None:
        logger.log(self._level, "%s[%6.2fs] %s", self._prefix, self._elapsed(), message)

    @property
    def _prefix(self) -> str:
        return f"{self._label}: " if self._label else ""

    def _elapsed(self) -> float:
        return time.monotonic() - self._started
