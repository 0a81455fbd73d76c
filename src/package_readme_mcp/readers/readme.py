"""Read README.md from an installed package directory."""

from __future__ import annotations

import asyncio
from pathlib import Path

README_FILENAME = "README.md"


def read_readme(package_dir: Path | str) -> str | None:
    """Return the text of ``<package_dir>/README.md``, or None if missing/unreadable.

    Only the exact filename is tried: no README.rst, readme.md, or bare README.
    """
    path = Path(package_dir) / README_FILENAME
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None


async def aread_readme(package_dir: Path | str) -> str | None:
    """Async version of read_readme."""
    return await asyncio.to_thread(read_readme, package_dir)
