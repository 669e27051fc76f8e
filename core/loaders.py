"""Loading of analysis documents and package.json manifests."""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, model_validator

from .errors import AnalysisLoadError, ManifestLoadError
from .models import STATUS_NOT_LATEST, AnalysisError, AnalysisSet, DependencyAnalysis, ManifestDocument


class AnalysisErrorSchema(BaseModel):
    """Error detail as emitted by the analyzer."""
    message: str
    detail: Optional[str] = None


class AnalysisRecordSchema(BaseModel):
    """One dependency record of an analysis document."""
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok", "not-latest", "error"]
    current: Optional[str] = None
    latest: Optional[str] = None
    latest_range: Optional[str] = Field(default=None, alias="latestRange")
    diff: Optional[str] = None
    error: Optional[AnalysisErrorSchema] = None

    @model_validator(mode="after")
    def check_status_fields(self) -> "AnalysisRecordSchema":
        if self.status == "not-latest":
            missing = [
                name for name, value in
                [("current", self.current), ("latest", self.latest), ("latestRange", self.latest_range)]
                if value is None
            ]
            if missing:
                raise ValueError(f"not-latest record is missing {', '.join(missing)}")
        elif self.status == "error" and self.error is None:
            raise ValueError("error record is missing error")
        return self

    def to_model(self) -> DependencyAnalysis:
        return DependencyAnalysis(
            status=self.status,
            current=self.current,
            latest=self.latest,
            latest_range=self.latest_range,
            diff=self.diff,
            error=AnalysisError(**self.error.model_dump()) if self.error else None,
        )


class AnalysisDocument(RootModel[dict[str, dict[str, AnalysisRecordSchema]]]):
    """Whole analysis document: category -> dependency -> record."""


def parse_analysis(content: str) -> AnalysisSet:
    """Parse analysis JSON into an AnalysisSet, keeping category order.

    Args:
        content: The analysis document

    Returns:
        Parsed AnalysisSet
    """
    try:
        document = AnalysisDocument.model_validate_json(content)
    except ValidationError as e:
        raise AnalysisLoadError(f"Invalid analysis document: {e}") from e

    analysis = AnalysisSet()
    for key, records in document.root.items():
        deps = analysis.add_category(key)
        for package_name, record in records.items():
            deps[package_name] = record.to_model()
    return analysis


def load_analysis(path: Path) -> AnalysisSet:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise AnalysisLoadError(f"Cannot read analysis {path}: {e}") from e
    return parse_analysis(content)


def load_manifest(
    path: Path,
    output_path: Path | None = None,
    cwd: Path | None = None,
) -> ManifestDocument:
    """Read a package.json-style manifest.

    Args:
        path: Manifest file
        output_path: Where to write the patched manifest instead of ``path``
        cwd: Directory the display path is made relative to

    Returns:
        ManifestDocument ready to be patched
    """
    path = Path(path)
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestLoadError(f"Cannot read manifest {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ManifestLoadError(f"Manifest {path} is not a JSON object")

    return ManifestDocument(
        content=content,
        path=path,
        output_path=Path(output_path) if output_path else None,
        relative_path=display_path(path, cwd),
    )


def display_path(path: Path, cwd: Path | None = None) -> str:
    """Path shown to the operator: relative to cwd when the file lives below it."""
    base = Path(cwd) if cwd else Path.cwd()
    try:
        return str(path.resolve().relative_to(base.resolve()))
    except ValueError:
        return str(path)


def check_manifest_matches(analysis: AnalysisSet, manifest: ManifestDocument) -> None:
    """Ensure every upgradable dependency of the analysis has a range in the manifest.

    Raises:
        ManifestLoadError: a category or dependency is missing from the manifest
    """
    for key, deps in analysis.items():
        pending = [name for name, record in deps.items() if record.status == STATUS_NOT_LATEST]
        if not pending:
            continue
        section = manifest.content.get(key)
        if not isinstance(section, dict):
            raise ManifestLoadError(f"{manifest.relative_path} has no {key} section")
        for package_name in pending:
            if package_name not in section:
                raise ManifestLoadError(f"{package_name} is not listed in {key} of {manifest.relative_path}")
