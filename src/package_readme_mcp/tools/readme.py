"""get_npm_readme / get_gem_readme tools -- README of a locally installed package."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from package_readme_mcp.pipeline.readme import get_gem_package_readme, get_npm_package_readme
from package_readme_mcp.tools._helpers import run_tool


async def get_npm_readme(
    name: str,
    ctx: Context,
) -> dict[str, object]:
    """Get the README of an npm package installed in the project's node_modules.

    Use this to learn how to use a dependency: installation, API reference,
    and examples, exactly as shipped with the installed version.

    Args:
        name: npm package name, e.g. "react" or "@types/node".

    Returns:
        Dict with success=True and data (readme, name, version, description,
        homepage, npm_url, repository, license), or success=False and error
        (code, message, details). Error codes: INVALID_INPUT,
        PACKAGE_NOT_FOUND, README_NOT_FOUND, INTERNAL_ERROR.
    """
    return await run_tool(
        ctx,
        "get_npm_readme",
        lambda app: get_npm_package_readme(name, working_dir=app.settings.working_dir),
    )


async def get_gem_readme(
    name: str,
    ctx: Context,
) -> dict[str, object]:
    """Get the README of a Ruby gem from the project's bundle.

    The gem is located with `bundle show`. If it ships no README.md, a short
    README is built from the gemspec description or summary.

    Args:
        name: gem name, e.g. "rails".

    Returns:
        Dict with success=True and data (readme, name, version, gem_url), or
        success=False and error (code, message, details). Error codes:
        INVALID_INPUT, PACKAGE_NOT_FOUND, README_NOT_FOUND, INTERNAL_ERROR.
    """
    return await run_tool(
        ctx,
        "get_gem_readme",
        lambda app: get_gem_package_readme(name, locator=app.gem_locator),
    )
