"""Ports: resolving an installed package name to its directory."""

from __future__ import annotations

from typing import Protocol


class GemLocatorPort(Protocol):
    """Port for asking the Ruby toolchain where a gem is installed."""

    async def locate(self, name: str) -> str | None:
        """Return the gem's install directory, or None if it cannot be found."""
        ...
