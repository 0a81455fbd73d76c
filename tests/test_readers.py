"""Tests for readers/ -- package.json, README.md and gemspec parsing."""

from __future__ import annotations

from pathlib import Path

from package_readme_mcp.models import GemspecFacts
from package_readme_mcp.readers.gemspec import (
    aread_gemspec_facts,
    find_gemspec,
    parse_gemspec,
    read_gemspec_facts,
    read_gemspec_text,
)
from package_readme_mcp.readers.package_json import aread_package_json, read_package_json
from package_readme_mcp.readers.readme import aread_readme, read_readme
from tests.helpers import REACT_MANIFEST, make_gem, make_npm_package

RAILS_GEMSPEC = """\
# frozen_string_literal: true

Gem::Specification.new do |s|
  s.name        = "rails"
  s.version     = "7.0.0"
  s.summary     = "Full-stack web application framework."
  s.description = "Ruby on Rails is a full-stack web framework optimized for programmer happiness."
  s.homepage    = "https://rubyonrails.org"
  s.license     = "MIT"

  s.metadata = {
    "bug_tracker_uri"   => "https://github.com/rails/rails/issues",
    "source_code_uri"   => "https://github.com/rails/rails/tree/v7.0.0",
    "homepage_uri"      => "https://rubyonrails.org",
  }
end
"""

# ─── package.json ────────────────────────────────────────────


class TestReadPackageJson:
    def test_reads_fields(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "react", REACT_MANIFEST)

        manifest = read_package_json(package_dir)

        assert manifest is not None
        assert manifest.name == "react"
        assert manifest.version == "18.2.0"
        assert manifest.homepage == "https://reactjs.org/"
        assert manifest.license == "MIT"
        assert manifest.repository_url == "https://github.com/facebook/react.git"
        assert manifest.raw["description"] == REACT_MANIFEST["description"]

    def test_repository_object_url(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(
            tmp_path,
            "lodash",
            {"name": "lodash", "repository": {"type": "git", "url": "git+https://github.com/lodash/lodash.git"}},
        )

        manifest = read_package_json(package_dir)

        assert manifest is not None
        assert manifest.has_repository
        assert manifest.repository_url == "git+https://github.com/lodash/lodash.git"

    def test_missing_fields_are_none(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "bare", {"name": "bare"})

        manifest = read_package_json(package_dir)

        assert manifest is not None
        assert manifest.version is None
        assert manifest.repository is None
        assert not manifest.has_repository

    def test_non_string_license_dropped(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "old", {"name": "old", "license": {"type": "MIT"}})
        manifest = read_package_json(package_dir)
        assert manifest is not None
        assert manifest.license is None

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "nomanifest")
        assert read_package_json(package_dir) is None

    def test_malformed_json_returns_none(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "broken", "{not json")
        assert read_package_json(package_dir) is None

    def test_non_object_json_returns_none(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "list", "[1, 2, 3]")
        assert read_package_json(package_dir) is None

    async def test_async_variant(self, tmp_path: Path) -> None:
        package_dir = make_npm_package(tmp_path, "react", REACT_MANIFEST)
        manifest = await aread_package_json(package_dir)
        assert manifest is not None
        assert manifest.name == "react"


# ─── README.md ───────────────────────────────────────────────


class TestReadReadme:
    def test_reads_readme(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# Hello\n", encoding="utf-8")
        assert read_readme(tmp_path) == "# Hello\n"

    def test_missing_returns_none(self, tmp_path: Path) -> None:
        assert read_readme(tmp_path) is None

    def test_non_utf8_bytes_are_replaced(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_bytes(b"# Caf\xe9\n")
        assert read_readme(tmp_path) == "# Caf\ufffd\n"

    def test_other_extensions_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "README.rst").write_text("Hello\n=====\n", encoding="utf-8")
        (tmp_path / "README").write_text("Hello\n", encoding="utf-8")
        assert read_readme(tmp_path) is None

    def test_directory_named_readme_returns_none(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").mkdir()
        assert read_readme(tmp_path) is None

    async def test_async_variant(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# Async\n", encoding="utf-8")
        assert await aread_readme(tmp_path) == "# Async\n"


# ─── gemspec ─────────────────────────────────────────────────


class TestParseGemspec:
    def test_extracts_all_fields(self) -> None:
        facts = parse_gemspec(RAILS_GEMSPEC)

        assert facts == GemspecFacts(
            description=(
                "Ruby on Rails is a full-stack web framework optimized for programmer happiness."
            ),
            summary="Full-stack web application framework.",
            homepage="https://rubyonrails.org",
            source_code_uri="https://github.com/rails/rails/tree/v7.0.0",
            homepage_uri="https://rubyonrails.org",
            version="7.0.0",
        )

    def test_single_quotes_and_any_receiver(self) -> None:
        facts = parse_gemspec("spec.summary = 'A tiny gem'\nspec.homepage = 'https://github.com/o/tiny'")
        assert facts is not None
        assert facts.summary == "A tiny gem"
        assert facts.homepage == "https://github.com/o/tiny"
        assert facts.description is None

    def test_description_is_trimmed(self) -> None:
        facts = parse_gemspec('s.description = "  padded  "')
        assert facts is not None
        assert facts.description == "padded"

    def test_first_assignment_wins(self) -> None:
        facts = parse_gemspec('s.summary = "first"\ns.summary = "second"')
        assert facts is not None
        assert facts.summary == "first"

    def test_constant_version_ignored(self) -> None:
        facts = parse_gemspec('s.version = Rake::VERSION\ns.summary = "Make-like"')
        assert facts is not None
        assert facts.version is None

    def test_required_ruby_version_not_mistaken_for_version(self) -> None:
        facts = parse_gemspec('s.required_ruby_version = ">= 2.7"\ns.summary = "x"')
        assert facts is not None
        assert facts.version is None

    def test_metadata_key_order_does_not_matter(self) -> None:
        text = """s.metadata = {
          "homepage_uri" => "https://example.com",
          "source_code_uri" => "https://github.com/o/r"
        }"""
        facts = parse_gemspec(text)
        assert facts is not None
        assert facts.source_code_uri == "https://github.com/o/r"
        assert facts.homepage_uri == "https://example.com"

    def test_nothing_recognized_returns_none(self) -> None:
        assert parse_gemspec("Gem::Specification.new do |s|\n  s.name = 'x'\nend\n") is None


class TestRepositoryCandidates:
    def test_order_is_source_then_homepage_uri_then_homepage(self) -> None:
        facts = GemspecFacts(
            homepage="https://c.example",
            homepage_uri="https://b.example",
            source_code_uri="https://a.example",
        )
        assert list(facts.repository_candidates()) == [
            "https://a.example",
            "https://b.example",
            "https://c.example",
        ]

    def test_skips_missing(self) -> None:
        assert list(GemspecFacts(homepage="https://h").repository_candidates()) == ["https://h"]


class TestReadGemspecFacts:
    def test_reads_gemspec_from_directory(self, tmp_path: Path) -> None:
        gem_dir = make_gem(tmp_path, "rails-7.0.0", gemspec=RAILS_GEMSPEC)

        facts = read_gemspec_facts(gem_dir)

        assert facts is not None
        assert facts.version == "7.0.0"

    def test_no_gemspec_returns_none(self, tmp_path: Path) -> None:
        gem_dir = make_gem(tmp_path, "plain-1.0.0", readme="# plain\n")
        assert find_gemspec(gem_dir) is None
        assert read_gemspec_text(gem_dir) is None
        assert read_gemspec_facts(gem_dir) is None

    def test_latin1_author_does_not_hide_other_fields(self, tmp_path: Path) -> None:
        gem_dir = make_gem(tmp_path, "old-1.0.0")
        (gem_dir / "old.gemspec").write_bytes(
            b's.authors = ["Jos\xe9"]\n'
            b's.description = "Old but gold"\n'
            b's.homepage = "https://github.com/jose/old"\n'
        )

        facts = read_gemspec_facts(gem_dir)

        assert facts is not None
        assert facts.description == "Old but gold"
        assert facts.homepage == "https://github.com/jose/old"

    def test_missing_directory_returns_none(self, tmp_path: Path) -> None:
        assert read_gemspec_facts(tmp_path / "nope") is None

    def test_first_gemspec_by_name_is_used(self, tmp_path: Path) -> None:
        gem_dir = make_gem(tmp_path, "multi-1.0.0", gemspec='s.summary = "b"', gemspec_name="b.gemspec")
        (gem_dir / "a.gemspec").write_text('s.summary = "a"', encoding="utf-8")

        assert find_gemspec(gem_dir) == gem_dir / "a.gemspec"
        facts = read_gemspec_facts(gem_dir)
        assert facts is not None
        assert facts.summary == "a"

    async def test_async_variant(self, tmp_path: Path) -> None:
        gem_dir = make_gem(tmp_path, "rails-7.0.0", gemspec=RAILS_GEMSPEC)
        facts = await aread_gemspec_facts(gem_dir)
        assert facts is not None
        assert facts.summary == "Full-stack web application framework."
