"""Domain models for package-readme-mcp. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, field
from enum import StrEnum

# ─── Enumerations ─────────────────────────────────────────────


class PackageType(StrEnum):
    NPM = "npm"
    GEM = "gem"


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
    README_NOT_FOUND = "README_NOT_FOUND"
    REPOSITORY_NOT_FOUND = "REPOSITORY_NOT_FOUND"
    REPOSITORY_INVALID = "REPOSITORY_INVALID"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# ─── Input ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PackageQuery:
    """A lookup request for one package by name."""

    name: str


# ─── Manifest Models ──────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NpmManifest:
    """The fields of a package.json we care about, plus the raw document."""

    name: str | None = None
    version: str | None = None
    description: str | None = None
    homepage: str | None = None
    repository: str | dict[str, object] | None = None
    license: str | None = None
    raw: Mapping[str, object] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> NpmManifest:
        """Build from parsed JSON. Non-string scalar fields are dropped."""

        def _str(key: str) -> str | None:
            value = data.get(key)
            return value if isinstance(value, str) else None

        repository = data.get("repository")
        if not isinstance(repository, (str, dict)):
            repository = None

        return cls(
            name=_str("name"),
            version=_str("version"),
            description=_str("description"),
            homepage=_str("homepage"),
            repository=repository,
            license=_str("license"),
            raw=data,
        )

    @property
    def has_repository(self) -> bool:
        """True if package.json declares ``repository`` at all.

        Only a missing key, null or "" count as absent; an empty object or list
        is a declared but unusable field.
        """
        value = self.raw.get("repository")
        return value is not None and value != ""

    @property
    def repository_url(self) -> str | None:
        """The repository as a plain string: the field itself or its ``url`` key."""
        if isinstance(self.repository, str):
            return self.repository
        if isinstance(self.repository, dict):
            url = self.repository.get("url")
            return url if isinstance(url, str) else None
        return None


@dataclass(frozen=True, slots=True)
class GemspecFacts:
    """Fields regex-extracted from a .gemspec file. Any may be missing."""

    description: str | None = None
    summary: str | None = None
    homepage: str | None = None
    source_code_uri: str | None = None
    homepage_uri: str | None = None
    version: str | None = None

    def repository_candidates(self) -> Iterator[str]:
        """URLs that may point at the source repository, most specific first."""
        for candidate in (self.source_code_uri, self.homepage_uri, self.homepage):
            if candidate:
                yield candidate


# ─── Tool Return Models ───────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NpmPackageInfo:
    name: str
    readme: str
    npm_url: str
    version: str | None = None
    description: str | None = None
    homepage: str | None = None
    repository: str | None = None
    license: str | None = None


@dataclass(frozen=True, slots=True)
class GemPackageInfo:
    name: str
    readme: str
    gem_url: str
    version: str | None = None


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    repository: str


@dataclass(frozen=True, slots=True)
class PackageError:
    """A failure returned to the client instead of a raised exception."""

    code: ErrorCode
    message: str
    details: dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {"code": str(self.code), "message": self.message, "details": dict(self.details)}


PackageData = NpmPackageInfo | GemPackageInfo | RepositoryInfo


@dataclass(frozen=True, slots=True)
class PackageResult:
    """Tagged success/error outcome of one lookup."""

    success: bool
    data: PackageData | None = None
    error: PackageError | None = None

    @classmethod
    def ok(cls, data: PackageData) -> PackageResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: PackageError) -> PackageResult:
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, object]:
        if self.success and self.data is not None:
            payload = {k: v for k, v in asdict(self.data).items() if v is not None}
            return {"success": True, "data": payload}
        error = self.error or PackageError(ErrorCode.INTERNAL_ERROR, "Internal error: no result")
        return {"success": False, "error": error.to_dict()}
