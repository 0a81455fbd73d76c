"""Runtime settings, read from the environment once at server start."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WORKDIR_ENV = "PACKAGE_README_WORKDIR"
BUNDLE_TIMEOUT_ENV = "PACKAGE_README_BUNDLE_TIMEOUT"
LOG_LEVEL_ENV = "PACKAGE_README_LOG_LEVEL"

_DEFAULT_BUNDLE_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class Settings:
    """Where to look for installed packages.

    working_dir holds ``node_modules`` and the ``Gemfile``; None means the
    process working directory.
    """

    working_dir: str | None = None
    bundle_timeout: float = _DEFAULT_BUNDLE_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        working_dir = env.get(WORKDIR_ENV, "").strip() or None

        raw_timeout = env.get(BUNDLE_TIMEOUT_ENV, "").strip()
        bundle_timeout = _DEFAULT_BUNDLE_TIMEOUT
        if raw_timeout:
            try:
                bundle_timeout = float(raw_timeout)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r: not a number. Using %.0fs.",
                    BUNDLE_TIMEOUT_ENV,
                    raw_timeout,
                    _DEFAULT_BUNDLE_TIMEOUT,
                )
            else:
                if bundle_timeout <= 0:
                    logger.warning(
                        "Ignoring %s=%r: must be positive. Using %.0fs.",
                        BUNDLE_TIMEOUT_ENV,
                        raw_timeout,
                        _DEFAULT_BUNDLE_TIMEOUT,
                    )
                    bundle_timeout = _DEFAULT_BUNDLE_TIMEOUT

        return cls(working_dir=working_dir, bundle_timeout=bundle_timeout)
