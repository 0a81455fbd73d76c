"""Locate installed gems via ``bundle show``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from package_readme_mcp.locator.subprocess import run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BundleGemLocator:
    """Adapter for GemLocatorPort backed by the bundler CLI.

    Every failure (bundler missing, gem not in the bundle, timeout) collapses
    to None; callers report all of them as "package not found".
    """

    working_dir: str | None = None
    timeout: float = 30.0

    async def locate(self, name: str) -> str | None:
        try:
            returncode, stdout, stderr = await run_command(
                ["bundle", "show", name],
                cwd=self.working_dir,
                timeout=self.timeout,
            )
        except OSError as exc:
            logger.debug("Could not run bundler for gem '%s': %s", name, exc)
            return None

        path = stdout.strip()
        if returncode != 0 or not path:
            logger.debug(
                "bundle show %s exited with %d: %s", name, returncode, stderr.strip()
            )
            return None
        return path
