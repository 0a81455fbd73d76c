"""README lookups for installed npm packages and gems.

The README comes from an ordered list of strategies; the first one that
yields text wins:

    npm: README.md
    gem: README.md -> "# <name>\\n\\n<gemspec description or summary>"
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from pathlib import Path
from urllib.parse import quote

from package_readme_mcp.errors import ReadmeNotFoundError
from package_readme_mcp.locator.base import GemLocatorPort
from package_readme_mcp.locator.gem import BundleGemLocator
from package_readme_mcp.locator.npm import resolve_package_path
from package_readme_mcp.models import GemPackageInfo, NpmPackageInfo, PackageResult, PackageType
from package_readme_mcp.pipeline.base import (
    PathResolver,
    locate_gem,
    locate_npm_package,
    run_guarded,
)
from package_readme_mcp.readers.gemspec import aread_gemspec_facts
from package_readme_mcp.readers.readme import aread_readme
from package_readme_mcp.validation import validate_package_name

NPM_REGISTRY_URL = "https://www.npmjs.com/package/"
GEM_REGISTRY_URL = "https://rubygems.org/gems/"

ReadmeStrategy = Callable[[str, Path], Awaitable[str | None]]
VersionStrategy = Callable[[str, Path], Awaitable[str | None]]


# ─── README strategies ────────────────────────────────────────


async def readme_from_file(name: str, package_dir: Path) -> str | None:
    return await aread_readme(package_dir) or None


async def readme_from_gemspec(name: str, package_dir: Path) -> str | None:
    """Synthesize a minimal README from the gemspec description or summary."""
    facts = await aread_gemspec_facts(package_dir)
    if facts is None:
        return None
    text = facts.description or facts.summary
    return f"# {name}\n\n{text}" if text else None


NPM_README_STRATEGIES: tuple[ReadmeStrategy, ...] = (readme_from_file,)
GEM_README_STRATEGIES: tuple[ReadmeStrategy, ...] = (readme_from_file, readme_from_gemspec)


async def resolve_readme(
    name: str,
    package_dir: Path,
    strategies: Sequence[ReadmeStrategy],
) -> str | None:
    for strategy in strategies:
        readme = await strategy(name, package_dir)
        if readme:
            return readme
    return None


# ─── Gem version strategies ───────────────────────────────────


async def version_from_directory(name: str, gem_dir: Path) -> str | None:
    """Bundler installs gems as ``<name>-<version>``."""
    prefix = f"{name}-"
    basename = gem_dir.name
    if basename.startswith(prefix):
        version = basename[len(prefix) :]
        if version[:1].isdigit():
            return version
    return None


async def version_from_gemspec(name: str, gem_dir: Path) -> str | None:
    facts = await aread_gemspec_facts(gem_dir)
    return facts.version if facts else None


GEM_VERSION_STRATEGIES: tuple[VersionStrategy, ...] = (version_from_directory, version_from_gemspec)


async def resolve_gem_version(name: str, gem_dir: Path) -> str | None:
    for strategy in GEM_VERSION_STRATEGIES:
        version = await strategy(name, gem_dir)
        if version:
            return version
    return None


# ─── URLs ─────────────────────────────────────────────────────


def npm_package_url(name: str) -> str:
    return NPM_REGISTRY_URL + quote(name, safe="")


def gem_package_url(name: str, version: str | None = None) -> str:
    url = GEM_REGISTRY_URL + quote(name, safe="")
    if version:
        url += f"/versions/{quote(version, safe='')}"
    return url


def _readme_not_found(
    name: str, version: str | None, package_type: PackageType
) -> ReadmeNotFoundError:
    return ReadmeNotFoundError(
        f"README not found for {package_type} package '{name}' version '{version or 'unknown'}'",
        {"package_name": name, "version": version, "package_type": str(package_type)},
    )


# ─── Pipelines ────────────────────────────────────────────────


async def _npm_readme(
    name: str,
    working_dir: str | Path | None,
    path_resolver: PathResolver,
) -> NpmPackageInfo:
    query = validate_package_name(name)
    package_dir, manifest = await locate_npm_package(query.name, working_dir, path_resolver)

    readme = await resolve_readme(query.name, package_dir, NPM_README_STRATEGIES)
    if readme is None:
        raise _readme_not_found(query.name, manifest.version, PackageType.NPM)

    return NpmPackageInfo(
        name=manifest.name or query.name,
        version=manifest.version,
        readme=readme,
        description=manifest.description,
        homepage=manifest.homepage,
        npm_url=npm_package_url(query.name),
        repository=manifest.repository_url,
        license=manifest.license,
    )


async def _gem_readme(name: str, locator: GemLocatorPort) -> GemPackageInfo:
    query = validate_package_name(name)
    gem_dir = await locate_gem(query.name, locator)

    readme = await resolve_readme(query.name, gem_dir, GEM_README_STRATEGIES)
    version = await resolve_gem_version(query.name, gem_dir)
    if readme is None:
        raise _readme_not_found(query.name, version, PackageType.GEM)

    return GemPackageInfo(
        name=query.name,
        version=version,
        readme=readme,
        gem_url=gem_package_url(query.name, version),
    )


async def get_npm_package_readme(
    name: str,
    working_dir: str | Path | None = None,
    path_resolver: PathResolver = resolve_package_path,
) -> PackageResult:
    """Get README and manifest details for a package under node_modules.

    Failure codes: INVALID_INPUT, PACKAGE_NOT_FOUND, README_NOT_FOUND,
    INTERNAL_ERROR.
    """
    return await run_guarded(
        partial(_npm_readme, name, working_dir, path_resolver),
        "get_npm_package_readme",
    )


async def get_gem_package_readme(
    name: str,
    locator: GemLocatorPort | None = None,
) -> PackageResult:
    """Get the README for a gem in the current bundle.

    Falls back to a README synthesized from the gemspec description (or
    summary) when the gem ships no README.md.
    """
    return await run_guarded(
        partial(_gem_readme, name, locator or BundleGemLocator()),
        "get_gem_package_readme",
    )
