"""Parsing de URLs de repositorios GitHub.

Formatos aceptados:
- https://github.com/owner/repo
- https://github.com/owner/repo/
- https://github.com/owner/repo.git
- git@github.com:owner/repo(.git)
"""

from __future__ import annotations

import re

from core.domain.models import RepoRef
from core.errors import InvalidRepoUrlError


_HTTPS_PATTERN = re.compile(r"^https://github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$", re.IGNORECASE)
_SSH_PATTERN = re.compile(r"^git@github\.com:([^/]+)/([^/]+?)(?:\.git)?$", re.IGNORECASE)

INVALID_URL_MESSAGE = (
    "Invalid GitHub repository URL. Expected format: "
    "https://github.com/owner/repo or git@github.com:owner/repo.git"
)


def parse_repo_url(url: str) -> RepoRef:
    value = (url or "").strip()
    match = _HTTPS_PATTERN.match(value) or _SSH_PATTERN.match(value)
    if not match or not match.group(1) or not match.group(2):
        raise InvalidRepoUrlError(INVALID_URL_MESSAGE)

    repo = re.sub(r"\.git$", "", match.group(2), flags=re.IGNORECASE)
    return RepoRef(owner=match.group(1), repo=repo)
