"""Shared plumbing for the MCP tool functions.

Each tool is one pipeline call; ``run_tool`` supplies the AppContext and
guarantees a serialized result even when the server is misconfigured.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

from package_readme_mcp.models import ErrorCode, PackageError, PackageResult

if TYPE_CHECKING:
    from package_readme_mcp.server import AppContext

Lookup = Callable[["AppContext"], Awaitable[PackageResult]]


def app_context_of(ctx: Context) -> AppContext:
    """Return the lifespan AppContext; TypeError if app_lifespan was not installed."""
    from package_readme_mcp.server import AppContext

    app = ctx.request_context.lifespan_context
    if isinstance(app, AppContext):
        return app
    raise TypeError(
        f"lifespan_context is {type(app).__name__}, not AppContext; "
        "create the server with lifespan=app_lifespan"
    )


async def run_tool(ctx: Context, tool_name: str, lookup: Lookup) -> dict[str, object]:
    """Run one lookup and return its wire form, reporting internal errors via ctx."""
    try:
        result = await lookup(app_context_of(ctx))
    except Exception as exc:
        result = PackageResult.fail(
            PackageError(
                ErrorCode.INTERNAL_ERROR,
                f"Internal error: {type(exc).__name__}",
                {"original_error": str(exc)},
            )
        )

    if result.error is not None and result.error.code == ErrorCode.INTERNAL_ERROR:
        await ctx.error(f"{tool_name} failed: {result.error.details.get('original_error')}")
    return result.to_dict()
