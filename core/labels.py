"""Category display labels and diff severity presentation."""

from rich.text import Text

from .models import DependencyAnalysis

HEADER_MAP = {
    "dependencies": "Dependencies",
    "devDependencies": "Dev Dependencies",
    "optionalDependencies": "Optional Dependencies",
    "peerDependencies": "Peer Dependencies",
    "bundledDependencies": "Bundled Dependencies",
}

# Most disruptive first
SEVERITY_ORDER = [
    "major",
    "premajor",
    "minor",
    "preminor",
    "patch",
    "prepatch",
    "prerelease",
]

DIFF_STYLES = {
    "major": "diff.major",
    "premajor": "diff.major",
    "minor": "diff.minor",
    "preminor": "diff.minor",
    "patch": "diff.patch",
    "prepatch": "diff.patch",
    "prerelease": "diff.prerelease",
}


def category_label(key: str) -> str:
    """Display label for a category key, falling back to the key itself."""
    return HEADER_MAP.get(key, key)


def get_sort_key(analysis: DependencyAnalysis) -> int:
    """Rank used to list riskier upgrades first; unknown tags sort last."""
    try:
        return SEVERITY_ORDER.index(analysis.diff)
    except ValueError:
        return len(SEVERITY_ORDER)


def colorize_diff(diff: str | None) -> Text:
    """Render a diff severity tag in its severity color."""
    if not diff:
        return Text("")
    return Text(diff, style=DIFF_STYLES.get(diff, "diff.unknown"))
