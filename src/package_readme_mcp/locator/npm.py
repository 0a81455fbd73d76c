"""Resolve npm package names to their node_modules directory."""

from __future__ import annotations

from pathlib import Path


def resolve_package_path(name: str, working_dir: str | Path | None = None) -> Path:
    """Return ``<working_dir>/node_modules/<name>``.

    Scoped names (``@scope/pkg``) are already valid relative paths and pass
    through unchanged. Does not touch the filesystem.
    """
    base = Path(working_dir) if working_dir is not None else Path.cwd()
    return base / "node_modules" / name
