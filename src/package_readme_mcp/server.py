"""MCP server that reads READMEs and repository info of locally installed packages."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from package_readme_mcp.config import Settings
from package_readme_mcp.locator.base import GemLocatorPort
from package_readme_mcp.locator.gem import BundleGemLocator
from package_readme_mcp.tools.readme import get_gem_readme, get_npm_readme
from package_readme_mcp.tools.repository import (
    get_gem_github_repository,
    get_npm_github_repository,
)


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations.

    Only the gem locator (external process boundary) is injected. Filesystem
    readers are stateless module functions.
    """

    settings: Settings
    gem_locator: GemLocatorPort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Build settings and adapters -- the composition root."""
    settings = Settings.from_env()
    gem_locator = BundleGemLocator(
        working_dir=settings.working_dir,
        timeout=settings.bundle_timeout,
    )
    yield AppContext(settings=settings, gem_locator=gem_locator)


mcp = FastMCP(
    "package-readme-mcp",
    instructions=(
        "package-readme-mcp reads documentation of packages installed in the "
        "current project. Everything comes from the local disk, so the answers "
        "match the exact versions the project uses.\n\n"
        "- **get_npm_readme**: README and package.json details of a package in node_modules.\n"
        "- **get_gem_readme**: README of a gem in the bundle (falls back to the "
        "gemspec description).\n"
        "- **get_npm_github_repository** / **get_gem_github_repository**: the "
        "GitHub 'owner/repo' of a package, useful for browsing its source or issues.\n\n"
        "Prefer these tools over web searches when the user asks how to use a "
        "dependency that is already installed. A PACKAGE_NOT_FOUND error means "
        "the package is not installed here (or bundler is unavailable)."
    ),
    lifespan=app_lifespan,
)

_READ_ONLY = ToolAnnotations(readOnlyHint=True, openWorldHint=False)

mcp.tool(annotations=_READ_ONLY)(get_npm_readme)
mcp.tool(annotations=_READ_ONLY)(get_gem_readme)
mcp.tool(annotations=_READ_ONLY)(get_npm_github_repository)
mcp.tool(annotations=_READ_ONLY)(get_gem_github_repository)
