"""GitHub repository lookups for installed npm packages and gems.

npm: ``repository`` field -> any GitHub URL anywhere in package.json.
     A repository field that is present but not a GitHub reference is
     reported as REPOSITORY_INVALID without trying the text scan.
gem: metadata source_code_uri -> metadata homepage_uri -> homepage.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from functools import partial
from pathlib import Path

from package_readme_mcp.errors import RepositoryInvalidError, RepositoryNotFoundError
from package_readme_mcp.github_url import extract_repository_name, get_repository_name_from_text
from package_readme_mcp.locator.base import GemLocatorPort
from package_readme_mcp.locator.gem import BundleGemLocator
from package_readme_mcp.locator.npm import resolve_package_path
from package_readme_mcp.models import NpmManifest, PackageResult, PackageType, RepositoryInfo
from package_readme_mcp.pipeline.base import (
    PathResolver,
    locate_gem,
    locate_npm_package,
    run_guarded,
)
from package_readme_mcp.readers.gemspec import aread_gemspec_facts
from package_readme_mcp.validation import validate_package_name

ManifestStrategy = Callable[[str, NpmManifest], str | None]


def slug_from_repository_field(name: str, manifest: NpmManifest) -> str | None:
    """Slug from ``repository`` (string or ``{url}``); None only if the field is absent."""
    if not manifest.has_repository:
        return None
    url = manifest.repository_url
    slug = extract_repository_name(url) if url else None
    if slug is None:
        raise RepositoryInvalidError(
            f"Invalid or non-GitHub repository for package: {name}",
            {"package_name": name, "repository": manifest.raw.get("repository")},
        )
    return slug


def slug_from_manifest_text(name: str, manifest: NpmManifest) -> str | None:
    """Scan the whole serialized manifest for an embedded GitHub URL."""
    return get_repository_name_from_text(json.dumps(manifest.raw))


NPM_REPOSITORY_STRATEGIES: tuple[ManifestStrategy, ...] = (
    slug_from_repository_field,
    slug_from_manifest_text,
)


def resolve_npm_repository(
    name: str,
    manifest: NpmManifest,
    strategies: Sequence[ManifestStrategy] = NPM_REPOSITORY_STRATEGIES,
) -> str | None:
    for strategy in strategies:
        slug = strategy(name, manifest)
        if slug:
            return slug
    return None


def _repository_not_found(name: str, package_type: PackageType) -> RepositoryNotFoundError:
    kind = "package" if package_type == PackageType.NPM else "gem"
    return RepositoryNotFoundError(
        f"Repository information not found for {kind}: {name}",
        {"package_name": name, "package_type": str(package_type)},
    )


async def _npm_repository(
    name: str,
    working_dir: str | Path | None,
    path_resolver: PathResolver,
) -> RepositoryInfo:
    query = validate_package_name(name)
    _, manifest = await locate_npm_package(query.name, working_dir, path_resolver)

    slug = resolve_npm_repository(query.name, manifest)
    if slug is None:
        raise _repository_not_found(query.name, PackageType.NPM)
    return RepositoryInfo(repository=slug)


async def _gem_repository(name: str, locator: GemLocatorPort) -> RepositoryInfo:
    query = validate_package_name(name)
    gem_dir = await locate_gem(query.name, locator)

    facts = await aread_gemspec_facts(gem_dir)
    if facts is not None:
        for candidate in facts.repository_candidates():
            slug = extract_repository_name(candidate)
            if slug:
                return RepositoryInfo(repository=slug)
    raise _repository_not_found(query.name, PackageType.GEM)


async def get_npm_github_repository(
    name: str,
    working_dir: str | Path | None = None,
    path_resolver: PathResolver = resolve_package_path,
) -> PackageResult:
    """Get the GitHub ``owner/repo`` for a package under node_modules.

    Failure codes: INVALID_INPUT, PACKAGE_NOT_FOUND, REPOSITORY_NOT_FOUND,
    REPOSITORY_INVALID, INTERNAL_ERROR.
    """
    return await run_guarded(
        partial(_npm_repository, name, working_dir, path_resolver),
        "get_npm_github_repository",
    )


async def get_gem_github_repository(
    name: str,
    locator: GemLocatorPort | None = None,
) -> PackageResult:
    """Get the GitHub ``owner/repo`` for a gem in the current bundle."""
    return await run_guarded(
        partial(_gem_repository, name, locator or BundleGemLocator()),
        "get_gem_github_repository",
    )
