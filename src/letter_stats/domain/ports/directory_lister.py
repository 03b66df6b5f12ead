"""Port: directory lister — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, Sequence

from letter_stats.domain.entities import RepositoryEntry


class DirectoryLister(Protocol):
    """Abstract contract for listing one directory of a repository."""

    async def list_directory(self, path: str) -> Sequence[RepositoryEntry]:
        """Return the immediate children of *path* (``""`` is the root).

        Raises ``NotFoundError`` when the path does not exist and
        ``TransportError`` on network or authentication failure.
        """
        ...
