"""Builders for installed-package fixtures on disk."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

REACT_MANIFEST: dict[str, object] = {
    "name": "react",
    "version": "18.2.0",
    "description": "React is a JavaScript library for building user interfaces.",
    "homepage": "https://reactjs.org/",
    "repository": "https://github.com/facebook/react.git",
    "license": "MIT",
}

REACT_README = "# React\n\nA JavaScript library for building user interfaces.\n"


@dataclass
class FakeGemLocator:
    """GemLocatorPort backed by a name -> directory mapping."""

    paths: dict[str, str] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def locate(self, name: str) -> str | None:
        self.calls.append(name)
        return self.paths.get(name)


def make_npm_package(
    root: Path,
    name: str,
    manifest: dict[str, object] | str | None = None,
    readme: str | None = None,
) -> Path:
    """Create ``root/node_modules/<name>`` with an optional package.json and README.md.

    A str manifest is written verbatim (for malformed JSON cases).
    """
    package_dir = root / "node_modules" / name
    package_dir.mkdir(parents=True)
    if manifest is not None:
        text = manifest if isinstance(manifest, str) else json.dumps(manifest, indent=2)
        (package_dir / "package.json").write_text(text, encoding="utf-8")
    if readme is not None:
        (package_dir / "README.md").write_text(readme, encoding="utf-8")
    return package_dir


def make_gem(
    root: Path,
    dirname: str,
    gemspec: str | None = None,
    readme: str | None = None,
    gemspec_name: str | None = None,
) -> Path:
    """Create an installed-gem directory as bundler lays it out."""
    gem_dir = root / "gems" / dirname
    gem_dir.mkdir(parents=True)
    if gemspec is not None:
        filename = gemspec_name or f"{dirname.rsplit('-', 1)[0]}.gemspec"
        (gem_dir / filename).write_text(gemspec, encoding="utf-8")
    if readme is not None:
        (gem_dir / "README.md").write_text(readme, encoding="utf-8")
    return gem_dir


