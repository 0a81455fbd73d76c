"""Extract GitHub ``owner/repo`` slugs from URLs and free text."""

from __future__ import annotations

import re

# github.com/owner/repo or github.com:owner/repo, optional .git, optional /path or #fragment
_REPO_PATTERN = re.compile(r"github\.com[/:]([^/]+/[^/]+?)(?:\.git)?(?:[/#].*)?$")

_URL_IN_TEXT_PATTERN = re.compile(r"https?://github\.com/[^/\s\"'`]+/[^/\s\"'`]+")


def extract_repository_name(url: str) -> str | None:
    """Return ``owner/repo`` for a GitHub URL, or None if it is not one.

    Handles:
    - https://github.com/owner/repo
    - https://github.com/owner/repo.git
    - https://github.com/owner/repo/tree/main#readme
    - git+https://github.com/owner/repo.git
    - git@github.com:owner/repo.git
    """
    m = _REPO_PATTERN.search(url)
    return m.group(1) if m else None


def extract_github_url_from_text(text: str) -> str | None:
    """Return the first GitHub URL embedded in arbitrary text."""
    m = _URL_IN_TEXT_PATTERN.search(text)
    return m.group(0) if m else None


def get_repository_name_from_text(text: str) -> str | None:
    """Find the first GitHub URL in text and reduce it to ``owner/repo``."""
    url = extract_github_url_from_text(text)
    return extract_repository_name(url) if url else None
