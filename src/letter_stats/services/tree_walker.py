"""Tree walker — discovers the content references of every eligible file.

Each subtree is walked by a pure recursive coroutine that returns an
immutable tuple of references; the caller unions the tuples.  There is no
shared traversal state.
"""

from __future__ import annotations

import asyncio
import logging
from itertools import chain

from letter_stats.domain.entities import EntryKind
from letter_stats.domain.exceptions import DiscoveryDepthError
from letter_stats.domain.ports.directory_lister import DirectoryLister
from letter_stats.services.concurrency import gather_or_cancel

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a repository through the :class:`DirectoryLister` port.

    Parameters
    ----------
    lister:
        Adapter that lists one directory at a time.
    max_concurrency:
        Maximum number of listing calls in flight at once.
    max_depth:
        Deepest subdirectory level (root = 0) the walker will enter.
    """

    def __init__(
        self,
        lister: DirectoryLister,
        max_concurrency: int = 10,
        max_depth: int = 32,
    ) -> None:
        self._lister = lister
        self._max_concurrency = max_concurrency
        self._max_depth = max_depth

    async def discover(self, root: str = "", recursive: bool = True) -> tuple[str, ...]:
        """Return the deduplicated content references under *root*.

        With ``recursive=False`` only the root's immediate children are
        inspected.  Any listing failure aborts the whole discovery.
        """
        sem = asyncio.Semaphore(self._max_concurrency)
        refs = await self._walk(root, recursive, 0, sem)
        unique = tuple(dict.fromkeys(refs))
        if len(unique) != len(refs):
            logger.debug("Dropped %d duplicate reference(s)", len(refs) - len(unique))
        return unique

    async def _walk(
        self,
        path: str,
        recursive: bool,
        depth: int,
        sem: asyncio.Semaphore,
    ) -> tuple[str, ...]:
        if depth > self._max_depth:
            raise DiscoveryDepthError(
                f"Directory '{path}' is nested deeper than {self._max_depth} levels."
            )

        # The permit covers the listing call only; holding it across the
        # recursion would deadlock once the tree is deeper than the pool.
        async with sem:
            entries = await self._lister.list_directory(path)
        logger.debug("Listed '%s': %d entries", path or "/", len(entries))

        refs: tuple[str, ...] = tuple(
            entry.content_ref for entry in entries if entry.is_eligible
        )
        if not recursive:
            return refs

        subdirs = [
            entry.path
            for entry in entries
            if entry.kind is EntryKind.DIRECTORY and entry.path
        ]
        subtrees = await gather_or_cancel(
            *(self._walk(sub, recursive, depth + 1, sem) for sub in subdirs)
        )
        return refs + tuple(chain.from_iterable(subtrees))
