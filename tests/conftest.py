"""Pytest configuration and fixtures."""

import io
import json

import pytest

from core.models import AnalysisSet, ManifestDocument
from core.ui import make_console
from tests.factories import failed, not_latest, up_to_date


@pytest.fixture
def console():
    """Uncolored console writing into a buffer; read it with console.file.getvalue()."""
    return make_console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "version": "1.0.0",
  "dependencies": {
    "express": "^4.18.0",
    "left-pad": "^1.0.0",
    "lodash": "~4.17.21"
  },
  "devDependencies": {
    "jest": "^29.0.0",
    "typescript": "^5.0.0"
  }
}
"""


@pytest.fixture
def manifest_file(tmp_path, sample_package_json):
    """Create a temporary package.json for testing."""
    manifest = tmp_path / "package.json"
    manifest.write_text(sample_package_json)
    return manifest


@pytest.fixture
def manifest(manifest_file):
    """ManifestDocument loaded from the temporary package.json."""
    return ManifestDocument(
        content=json.loads(manifest_file.read_text()),
        path=manifest_file,
        relative_path="package.json",
    )


@pytest.fixture
def sample_analysis():
    """Analysis matching sample_package_json, with one failed dependency."""
    return AnalysisSet.from_mapping({
        "dependencies": {
            "express": not_latest("4.18.0", "5.0.1", "major"),
            "left-pad": not_latest("1.0.0", "1.0.1", "patch"),
            "lodash": failed("Failed to fetch lodash", "ETIMEDOUT"),
        },
        "devDependencies": {
            "jest": up_to_date("29.0.0"),
            "typescript": not_latest("5.0.0", "5.4.0", "minor"),
        },
    })


@pytest.fixture
def sample_analysis_json():
    """The analyzer's JSON form of an analysis document."""
    return json.dumps({
        "dependencies": {
            "left-pad": {
                "status": "not-latest",
                "current": "1.0.0",
                "latest": "1.0.1",
                "latestRange": "^1.0.1",
                "diff": "patch",
            },
            "express": {
                "status": "ok",
                "current": "4.18.0",
                "latest": "4.18.0",
                "latestRange": "^4.18.0",
            },
        },
        "devDependencies": {
            "jest": {
                "status": "error",
                "error": {"message": "Registry returned 500", "detail": "GET /jest"},
            },
        },
    })
