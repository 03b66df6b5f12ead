from __future__ import annotations

import pytest

from letter_stats.infrastructure.config import get_settings
from tests.fakes import FakeLister, RecordingProgress, dir_entry, file_entry


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def sample_lister() -> FakeLister:
    """Root with ``index.js``, ``readme.md`` and ``lib/`` (which holds ``util.ts``)."""
    return FakeLister(
        {
            "": [file_entry("index.js"), file_entry("readme.md"), dir_entry("lib")],
            "lib": [file_entry("lib/util.ts")],
        }
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep the host environment and ``.env`` out of Settings."""
    for var in ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "MAX_CONCURRENCY", "MAX_DEPTH", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
