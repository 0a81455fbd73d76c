"""get_npm_github_repository / get_gem_github_repository tools."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from package_readme_mcp.pipeline.repository import (
    get_gem_github_repository as gem_repository_lookup,
)
from package_readme_mcp.pipeline.repository import (
    get_npm_github_repository as npm_repository_lookup,
)
from package_readme_mcp.tools._helpers import run_tool


async def get_npm_github_repository(
    name: str,
    ctx: Context,
) -> dict[str, object]:
    """Get the GitHub repository ("owner/repo") of an installed npm package.

    Reads the package.json `repository` field; if it is missing, looks for
    any GitHub URL elsewhere in package.json.

    Args:
        name: npm package name, e.g. "react" or "@types/node".

    Returns:
        Dict with success=True and data.repository, or success=False and
        error. Error codes: INVALID_INPUT, PACKAGE_NOT_FOUND,
        REPOSITORY_NOT_FOUND, REPOSITORY_INVALID (the field is not a GitHub
        URL), INTERNAL_ERROR.
    """
    return await run_tool(
        ctx,
        "get_npm_github_repository",
        lambda app: npm_repository_lookup(name, working_dir=app.settings.working_dir),
    )


async def get_gem_github_repository(
    name: str,
    ctx: Context,
) -> dict[str, object]:
    """Get the GitHub repository ("owner/repo") of a gem in the project's bundle.

    Checks the gemspec's metadata source_code_uri, then homepage_uri, then
    homepage.

    Args:
        name: gem name, e.g. "rails".

    Returns:
        Dict with success=True and data.repository, or success=False and
        error. Error codes: INVALID_INPUT, PACKAGE_NOT_FOUND,
        REPOSITORY_NOT_FOUND, INTERNAL_ERROR.
    """
    return await run_tool(
        ctx,
        "get_gem_github_repository",
        lambda app: gem_repository_lookup(name, locator=app.gem_locator),
    )
