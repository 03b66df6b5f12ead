"""Progress sink that writes per-file notifications to the log."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingProgressSink:
    """Concrete ``ProgressSink`` backed by :mod:`logging`."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def notify_progress(self, message: str) -> None:
        logger.log(self._level, message)
