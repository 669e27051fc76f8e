"""Tests for partitioning analysis results."""

from core.classify import classify_results
from core.models import AnalysisSet
from tests.factories import failed, not_latest, up_to_date


class TestClassifyResults:
    """Test ReviewModel construction from an AnalysisSet."""

    def test_keeps_only_not_latest_entries(self, sample_analysis, console):
        """Should keep exactly the not-latest records, unchanged."""
        model = classify_results(sample_analysis, console=console)

        assert list(model.not_latest["dependencies"]) == ["express", "left-pad"]
        assert list(model.not_latest["devDependencies"]) == ["typescript"]
        assert model.not_latest["dependencies"]["express"] is sample_analysis["dependencies"]["express"]

    def test_counts_errors(self, sample_analysis, console):
        """errors_count should equal the number of error records."""
        model = classify_results(sample_analysis, console=console)
        assert model.errors_count == 1

    def test_retains_empty_categories(self, console):
        """Categories with nothing pending should still be present, in order."""
        analysis = AnalysisSet.from_mapping({
            "devDependencies": {"jest": up_to_date("29.0.0")},
            "dependencies": {"left-pad": not_latest("1.0.0", "1.0.1", "patch")},
            "peerDependencies": {},
        })

        model = classify_results(analysis, console=console)

        assert model.not_latest.keys == ["devDependencies", "dependencies", "peerDependencies"]
        assert model.not_latest["devDependencies"] == {}
        assert model.not_latest["peerDependencies"] == {}
        assert model.not_latest_exist is True

    def test_nothing_pending(self, console):
        """not_latest_exist should be False when every category is up to date."""
        analysis = AnalysisSet.from_mapping({
            "dependencies": {"express": up_to_date("4.18.0")},
        })

        model = classify_results(analysis, console=console)

        assert model.not_latest_exist is False
        assert model.errors_count == 0
        assert console.file.getvalue() == ""

    def test_errors_reported_in_encounter_order(self, console):
        """Should print one diagnostic per error, then a single blank line."""
        reported = []
        analysis = AnalysisSet.from_mapping({
            "dependencies": {
                "b": failed("b failed"),
                "a": not_latest("1.0.0", "2.0.0", "major"),
                "c": failed("c failed"),
            },
            "devDependencies": {"d": failed("d failed")},
        })

        model = classify_results(analysis, on_error=reported.append, console=console)

        assert [error.message for error in reported] == ["b failed", "c failed", "d failed"]
        assert model.errors_count == 3
        assert console.file.getvalue() == "\n"

    def test_default_error_printer(self, sample_analysis, console):
        """Should print the error message and detail to the console."""
        classify_results(sample_analysis, console=console)

        output = console.file.getvalue()
        assert "✖ Failed to fetch lodash" in output
        assert "ETIMEDOUT" in output
        assert output.endswith("\n\n")

    def test_error_only_category_does_not_need_review(self, console):
        """Errors alone should not make the review prompt necessary."""
        analysis = AnalysisSet.from_mapping({"dependencies": {"x": failed("boom")}})

        model = classify_results(analysis, console=console)

        assert model.not_latest_exist is False
        assert model.errors_count == 1
        assert model.not_latest["dependencies"] == {}
