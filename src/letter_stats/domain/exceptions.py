"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code (or CLI exit) at the
interface layer.  Inner layers raise these; the outermost handler translates
them.
"""

from __future__ import annotations


class LetterStatsError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryError(LetterStatsError):
    """The configured repository identity is not a valid ``owner/repo``."""


class InvalidPathError(LetterStatsError, ValueError):
    """A starting directory escapes the repository root."""


# ── Collaborator errors ─────────────────────────────────────────────────────


class TransportError(LetterStatsError):
    """Network or protocol failure talking to the hosting service."""


class AuthenticationError(TransportError):
    """The access token was rejected (401)."""


class AccessDeniedError(TransportError):
    """Access to the repository was denied (403)."""


class RateLimitError(TransportError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class NotFoundError(LetterStatsError):
    """A directory path or content reference does not resolve (404)."""


# ── Discovery errors ────────────────────────────────────────────────────────


class DiscoveryDepthError(LetterStatsError):
    """Directory recursion went deeper than the configured bound."""
