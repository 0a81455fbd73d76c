"""Package name validation."""

from __future__ import annotations

import re

from package_readme_mcp.errors import InvalidInputError
from package_readme_mcp.models import PackageQuery

MAX_NAME_LENGTH = 256

_NAME_PATTERN = re.compile(r"[@A-Za-z0-9._/-]+")


def validate_package_name(name: object) -> PackageQuery:
    """Return a PackageQuery for a well-formed name, else raise InvalidInputError."""
    if not isinstance(name, str):
        raise InvalidInputError(
            f"Package name must be a string, got {type(name).__name__}", {"field": "name"}
        )
    if not name:
        raise InvalidInputError("Package name cannot be empty", {"field": "name"})
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidInputError(
            f"Package name must be {MAX_NAME_LENGTH} characters or less",
            {"field": "name", "length": len(name)},
        )
    if _NAME_PATTERN.fullmatch(name) is None:
        raise InvalidInputError(
            "Package name can only contain letters, numbers, hyphens, underscores, "
            "periods, slashes, and @ symbols",
            {"field": "name", "received": name},
        )
    # Path traversal would escape node_modules even though each char is allowed.
    if any(part in ("", ".", "..") for part in name.split("/")):
        raise InvalidInputError(
            f"Package name '{name}' is not a valid package path",
            {"field": "name", "received": name},
        )
    return PackageQuery(name=name)
