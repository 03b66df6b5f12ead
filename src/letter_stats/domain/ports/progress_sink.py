"""Port: progress sink — fire-and-forget observability hook."""

from __future__ import annotations

from typing import Protocol


class ProgressSink(Protocol):
    def notify_progress(self, message: str) -> None:
        ...
