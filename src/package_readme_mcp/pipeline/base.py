"""Shared pipeline plumbing: locating packages and the error boundary.

Every public lookup runs inside ``run_guarded`` so callers always receive a
PackageResult, never an exception.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from package_readme_mcp.errors import PackageNotFoundError, PackageReadmeError
from package_readme_mcp.locator.base import GemLocatorPort
from package_readme_mcp.locator.npm import resolve_package_path
from package_readme_mcp.models import (
    ErrorCode,
    NpmManifest,
    PackageData,
    PackageError,
    PackageResult,
    PackageType,
)
from package_readme_mcp.readers.package_json import aread_package_json

logger = logging.getLogger(__name__)

PathResolver = Callable[[str, str | Path | None], Path]


def package_not_found(name: str, package_type: PackageType) -> PackageNotFoundError:
    return PackageNotFoundError(
        f"{package_type} package '{name}' not found",
        {"package_name": name, "package_type": str(package_type)},
    )


async def locate_npm_package(
    name: str,
    working_dir: str | Path | None = None,
    path_resolver: PathResolver = resolve_package_path,
) -> tuple[Path, NpmManifest]:
    """Resolve an npm package directory and parse its manifest.

    Raises PackageNotFoundError if the directory is missing or the manifest
    is missing or unparseable.
    """
    package_dir = path_resolver(name, working_dir)
    if not await asyncio.to_thread(package_dir.is_dir):
        raise package_not_found(name, PackageType.NPM)

    manifest = await aread_package_json(package_dir)
    if manifest is None:
        raise package_not_found(name, PackageType.NPM)
    return package_dir, manifest


async def locate_gem(name: str, locator: GemLocatorPort) -> Path:
    """Ask the locator for a gem's directory. Raises PackageNotFoundError."""
    gem_path = await locator.locate(name)
    if not gem_path:
        raise package_not_found(name, PackageType.GEM)
    return Path(gem_path)


async def run_guarded(
    lookup: Callable[[], Awaitable[PackageData]],
    operation: str,
) -> PackageResult:
    """Run a lookup and convert every outcome into a PackageResult."""
    try:
        return PackageResult.ok(await lookup())
    except PackageReadmeError as exc:
        return PackageResult.fail(PackageError(exc.code, exc.message, exc.details))
    except Exception as exc:
        logger.exception("Unexpected error in %s", operation)
        return PackageResult.fail(
            PackageError(
                ErrorCode.INTERNAL_ERROR,
                "Internal error: Unexpected error occurred",
                {"original_error": str(exc), "error_type": type(exc).__name__},
            )
        )
