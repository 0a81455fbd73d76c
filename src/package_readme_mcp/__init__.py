"""package-readme-mcp: READMEs and GitHub repositories of locally installed packages."""

from __future__ import annotations

import logging
import os
import sys
from importlib import metadata

from package_readme_mcp.config import LOG_LEVEL_ENV

try:
    __version__ = metadata.version("package-readme-mcp")
except metadata.PackageNotFoundError:  # source checkout without install
    __version__ = "0.0.0+local"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str | None = None) -> int:
    """Send logs to stderr (stdout carries the MCP stream). Returns the level used."""
    level = logging.getLevelName((level_name or "WARNING").strip().upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format=_LOG_FORMAT)
    return level


def main() -> None:
    """Entry point for `package-readme-mcp`: serve over stdio."""
    configure_logging(os.environ.get(LOG_LEVEL_ENV))
    from package_readme_mcp.server import mcp

    logging.getLogger(__name__).info("package-readme-mcp %s serving on stdio", __version__)
    mcp.run(transport="stdio")
