"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from letter_stats.domain.exceptions import InvalidPathError, InvalidRepositoryError

_NAME = r"[A-Za-z0-9\-_.]+"
_REPO_RE = re.compile(
    rf"^(?:https?://github\.com/)?(?P<owner>{_NAME})/(?P<repo>{_NAME}?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepoRef:
    """Validated GitHub repository identity.

    Accepts either the short form ``lodash/lodash`` or a full URL like
    ``https://github.com/lodash/lodash``.  Rejects anything else.
    """

    owner: str
    repo: str

    @classmethod
    def from_string(cls, value: str) -> RepoRef:
        """Parse and validate a raw repository string."""
        value = value.strip()
        match = _REPO_RE.match(value)
        if not match:
            raise InvalidRepositoryError(
                f"Invalid repository: '{value}'. "
                "Expected format: <owner>/<repo> or https://github.com/<owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def normalize_repo_path(path: str) -> str:
    """Strip surrounding whitespace and slashes; reject ``..`` segments.

    ``""`` denotes the repository root.
    """
    stripped = path.strip().strip("/")
    if ".." in stripped.split("/"):
        raise InvalidPathError(
            f"Invalid path: '{path}'. Parent directory segments are not allowed."
        )
    return stripped
