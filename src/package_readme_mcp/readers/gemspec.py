"""Extract a few fields from Ruby .gemspec files.

A gemspec is executable Ruby, so it is never evaluated. Instead a fixed set
of conventional assignment shapes is matched against the raw text:

    spec.description = "..."        (also 'single' or `backtick` quotes)
    spec.summary     = "..."
    spec.homepage    = "..."
    spec.version     = "1.2.3"      (string literals only, not Foo::VERSION)
    spec.metadata    = { "source_code_uri" => "...", "homepage_uri" => "..." }

Any receiver name works (``s.``, ``spec.``, ``gem.``). The first match of
each pattern wins. Multi-line heredocs, %q{} strings, and
``spec.metadata["key"] = "..."`` are not recognized.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path

from package_readme_mcp.models import GemspecFacts

logger = logging.getLogger(__name__)

GEMSPEC_SUFFIX = ".gemspec"

_QUOTED = r"[\"'`]([^\"'`]+)[\"'`]"


def _assignment(attribute: str) -> re.Pattern[str]:
    return re.compile(rf"\.{attribute}\s*=\s*{_QUOTED}")


def _metadata_entry(key: str) -> re.Pattern[str]:
    return re.compile(rf"\.metadata\s*=\s*{{[^}}]*[\"'`]{key}[\"'`]\s*=>\s*{_QUOTED}")


_DESCRIPTION = _assignment("description")
_SUMMARY = _assignment("summary")
_HOMEPAGE = _assignment("homepage")
_VERSION = _assignment("version")
_SOURCE_CODE_URI = _metadata_entry("source_code_uri")
_HOMEPAGE_URI = _metadata_entry("homepage_uri")


def find_gemspec(gem_dir: Path | str) -> Path | None:
    """Return the first ``*.gemspec`` file in gem_dir (by name), or None."""
    try:
        candidates = sorted(
            entry for entry in Path(gem_dir).iterdir() if entry.name.endswith(GEMSPEC_SUFFIX)
        )
    except OSError as exc:
        logger.debug("Could not list %s: %s", gem_dir, exc)
        return None
    return candidates[0] if candidates else None


def read_gemspec_text(gem_dir: Path | str) -> str | None:
    """Return the raw text of the gem's gemspec, or None if there is none."""
    path = find_gemspec(gem_dir)
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def _first(pattern: re.Pattern[str], text: str) -> str | None:
    m = pattern.search(text)
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def parse_gemspec(text: str) -> GemspecFacts | None:
    """Extract GemspecFacts from gemspec source. None if no pattern matches."""
    facts = GemspecFacts(
        description=_first(_DESCRIPTION, text),
        summary=_first(_SUMMARY, text),
        homepage=_first(_HOMEPAGE, text),
        source_code_uri=_first(_SOURCE_CODE_URI, text),
        homepage_uri=_first(_HOMEPAGE_URI, text),
        version=_first(_VERSION, text),
    )
    if facts == GemspecFacts():
        return None
    return facts


def read_gemspec_facts(gem_dir: Path | str) -> GemspecFacts | None:
    """Find, read and parse the gemspec in gem_dir."""
    text = read_gemspec_text(gem_dir)
    if text is None:
        return None
    return parse_gemspec(text)


async def aread_gemspec_facts(gem_dir: Path | str) -> GemspecFacts | None:
    """Async version of read_gemspec_facts."""
    return await asyncio.to_thread(read_gemspec_facts, gem_dir)
