"""Tests for config.Settings."""

from __future__ import annotations

from package_readme_mcp.config import BUNDLE_TIMEOUT_ENV, WORKDIR_ENV, Settings


class TestSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings == Settings(working_dir=None, bundle_timeout=30.0)

    def test_reads_working_dir(self) -> None:
        settings = Settings.from_env({WORKDIR_ENV: "/srv/app"})
        assert settings.working_dir == "/srv/app"

    def test_blank_working_dir_is_none(self) -> None:
        assert Settings.from_env({WORKDIR_ENV: "   "}).working_dir is None

    def test_reads_timeout(self) -> None:
        assert Settings.from_env({BUNDLE_TIMEOUT_ENV: "5.5"}).bundle_timeout == 5.5

    def test_bad_timeout_falls_back(self, caplog) -> None:
        settings = Settings.from_env({BUNDLE_TIMEOUT_ENV: "soon"})
        assert settings.bundle_timeout == 30.0
        assert BUNDLE_TIMEOUT_ENV in caplog.text

    def test_non_positive_timeout_falls_back(self) -> None:
        assert Settings.from_env({BUNDLE_TIMEOUT_ENV: "0"}).bundle_timeout == 30.0
