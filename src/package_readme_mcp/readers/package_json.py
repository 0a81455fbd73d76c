"""Read npm package manifests (package.json)."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from package_readme_mcp.models import NpmManifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def read_package_json(package_dir: Path | str) -> NpmManifest | None:
    """Parse ``<package_dir>/package.json``.

    Returns None for a missing or unreadable file, malformed JSON, or a
    document whose top level is not an object. Missing fields are not errors.
    """
    path = Path(package_dir) / MANIFEST_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring %s: top-level JSON value is not an object", path)
        return None
    return NpmManifest.from_dict(data)


async def aread_package_json(package_dir: Path | str) -> NpmManifest | None:
    """Async version of read_package_json. Use from async code to avoid blocking the event loop."""
    return await asyncio.to_thread(read_package_json, package_dir)
