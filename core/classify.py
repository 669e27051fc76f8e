"""Partition analysis results into errors and dependencies needing review."""

import logging
from collections.abc import Callable

from rich.console import Console

from .models import (
    STATUS_ERROR,
    STATUS_NOT_LATEST,
    AnalysisError,
    AnalysisSet,
    ReviewModel,
)
from .ui import console as default_console
from .ui import print_error

logger = logging.getLogger(__name__)


def classify_results(
    analysis: AnalysisSet,
    on_error: Callable[[AnalysisError], None] | None = None,
    console: Console | None = None,
) -> ReviewModel:
    """Build the review model for an analysis, reporting failed dependencies.

    One diagnostic is printed per error record, in category order then mapping
    order, followed by a single blank line when any were printed.

    Args:
        analysis: Results from the external analyzer
        on_error: Diagnostic printer; defaults to ``print_error`` on ``console``
        console: Console receiving diagnostics and the separator line

    Returns:
        ReviewModel whose ``not_latest`` keeps every input category, even empty ones
    """
    out = console or default_console
    report = on_error or (lambda error: print_error(error, out))

    errors_count = 0
    not_latest = AnalysisSet()
    not_latest_exist = False

    for key, deps in analysis.items():
        pending = not_latest.add_category(key)

        for package_name, package_analysis in deps.items():
            if package_analysis.status == STATUS_ERROR:
                report(package_analysis.error)
                errors_count += 1
            elif package_analysis.status == STATUS_NOT_LATEST:
                pending[package_name] = package_analysis
                not_latest_exist = True

    if errors_count > 0:
        out.print()

    logger.debug(
        "Classified %d categories: %d errors, needs review: %s",
        len(analysis), errors_count, not_latest_exist,
    )

    return ReviewModel(
        errors_count=errors_count,
        not_latest=not_latest,
        not_latest_exist=not_latest_exist,
    )
