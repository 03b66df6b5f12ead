"""Fail-fast fan-out helper shared by discovery and aggregation."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable


async def gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """Await *aws* concurrently; on the first failure cancel the rest and re-raise.

    Plain ``asyncio.gather`` propagates the first exception but leaves sibling
    tasks running in the background.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
