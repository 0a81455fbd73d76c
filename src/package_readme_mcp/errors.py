"""Exception hierarchy for package-readme-mcp.

All exceptions inherit from PackageReadmeError (single catch point).
Each carries the machine-readable error code returned to MCP clients.
Messages are written for LLM consumption -- clear, actionable, no stack traces.
"""

from __future__ import annotations

from package_readme_mcp.models import ErrorCode


class PackageReadmeError(Exception):
    """Base exception for all package-readme-mcp errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(PackageReadmeError):
    """Package name failed validation."""

    code = ErrorCode.INVALID_INPUT


class PackageNotFoundError(PackageReadmeError):
    """Package is not installed (or its manifest is unreadable)."""

    code = ErrorCode.PACKAGE_NOT_FOUND


class ReadmeNotFoundError(PackageReadmeError):
    """Package is installed but has no README and no usable fallback."""

    code = ErrorCode.README_NOT_FOUND


class RepositoryNotFoundError(PackageReadmeError):
    """No repository reference could be found for the package."""

    code = ErrorCode.REPOSITORY_NOT_FOUND


class RepositoryInvalidError(PackageReadmeError):
    """Repository field exists but is not a recognizable GitHub reference."""

    code = ErrorCode.REPOSITORY_INVALID
