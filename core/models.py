"""Core data models for DepReview."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

STATUS_OK = "ok"
STATUS_NOT_LATEST = "not-latest"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class AnalysisError:
    """Error detail attached to a dependency whose analysis failed upstream."""

    message: str
    detail: str | None = None


@dataclass(frozen=True)
class DependencyAnalysis:
    """Analysis result for a single dependency of a manifest category."""

    status: str  # ok, not-latest, error
    current: str | None = None
    latest: str | None = None
    latest_range: str | None = None
    diff: str | None = None  # major, minor, patch, prerelease, ...
    error: AnalysisError | None = None


class AnalysisSet:
    """Analysis results grouped by manifest category.

    Category order is held in an explicit key sequence so display order never
    depends on how the underlying mapping happens to iterate.
    """

    def __init__(
        self,
        keys: list[str] | None = None,
        categories: dict[str, dict[str, DependencyAnalysis]] | None = None,
    ):
        self.keys: list[str] = list(keys or [])
        self._categories: dict[str, dict[str, DependencyAnalysis]] = {}
        for key in self.keys:
            self._categories[key] = dict((categories or {}).get(key, {}))

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Mapping[str, DependencyAnalysis]]
    ) -> "AnalysisSet":
        """Build an AnalysisSet, taking category order from the mapping's keys."""
        keys = list(mapping.keys())
        return cls(keys, {key: dict(mapping[key]) for key in keys})

    def add_category(self, key: str) -> dict[str, DependencyAnalysis]:
        """Register a category (if new) and return its dependency mapping."""
        if key not in self._categories:
            self.keys.append(key)
            self._categories[key] = {}
        return self._categories[key]

    def items(self) -> Iterator[tuple[str, dict[str, DependencyAnalysis]]]:
        for key in self.keys:
            yield key, self._categories[key]

    def __getitem__(self, key: str) -> dict[str, DependencyAnalysis]:
        return self._categories[key]

    def __contains__(self, key: object) -> bool:
        return key in self._categories

    def __len__(self) -> int:
        return len(self.keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnalysisSet):
            return NotImplemented
        return self.keys == other.keys and self._categories == other._categories

    def __repr__(self) -> str:
        return f"AnalysisSet({dict(self.items())!r})"


@dataclass
class ReviewModel:
    """Filtered view of an analysis restricted to entries needing review."""

    errors_count: int
    not_latest: AnalysisSet
    not_latest_exist: bool


@dataclass(frozen=True)
class UpdateChoice:
    """A dependency the operator selected for upgrade."""

    category_key: str
    package_name: str
    latest_range: str


@dataclass
class ManifestDocument:
    """A loaded manifest file, owned by the pipeline until it is written."""

    content: dict
    path: Path
    output_path: Path | None = None
    relative_path: str = ""

    def __post_init__(self):
        if not self.relative_path:
            self.relative_path = str(self.path)

    @property
    def target_path(self) -> Path:
        """Where the patched manifest is written."""
        return self.output_path or self.path


@dataclass(frozen=True)
class PatchRow:
    """One before/after line of the patch summary."""

    package_name: str
    old_range: str
    new_range: str


class ReviewOutcome(str, Enum):
    """Terminal state reached by the review pipeline."""

    ALL_GOOD = "all-good"
    NO_CHANGES = "no-changes"
    UPDATED = "updated"
