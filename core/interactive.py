"""Interactive review pipeline: classify, review, select, patch."""

import logging

from rich.console import Console

from .classify import classify_results
from .models import AnalysisSet, ManifestDocument, ReviewOutcome, UpdateChoice
from .patch import patch_manifest
from .present import show_all_good, show_prompt
from .prompt import CheckboxPrompt, Prompter
from .ui import console as default_console
from .ui import print_notice

logger = logging.getLogger(__name__)


def resolve_selection(
    updates: list[UpdateChoice],
    manifest: ManifestDocument,
    console: Console | None = None,
) -> ReviewOutcome:
    """Patch the manifest with the confirmed updates, if there are any."""
    out = console or default_console
    if not updates:
        print_notice(f"\nDid not change {manifest.relative_path}", out)
        return ReviewOutcome.NO_CHANGES

    patch_manifest(updates, manifest, out)
    return ReviewOutcome.UPDATED


def run_interactive(
    analysis: AnalysisSet,
    manifest: ManifestDocument,
    prompter: Prompter | None = None,
    console: Console | None = None,
    terminal_height: int | None = None,
) -> ReviewOutcome:
    """Run the whole review for one manifest.

    Args:
        analysis: Results from the external analyzer
        manifest: Loaded manifest, patched in place when updates are chosen
        prompter: Selection prompt; defaults to a CheckboxPrompt on ``console``
        console: Console receiving all output
        terminal_height: Terminal rows, or None when unknown

    Returns:
        The terminal state the review reached

    Raises:
        PromptCancelled: the operator cancelled; the manifest is untouched
        OSError: the patched manifest could not be written
    """
    out = console or default_console
    model = classify_results(analysis, console=out)

    if not model.not_latest_exist:
        show_all_good(model, out)
        return ReviewOutcome.ALL_GOOD

    if prompter is None:
        prompter = CheckboxPrompt(console=out)

    updates = show_prompt(model, manifest, prompter, terminal_height)
    logger.debug("Operator selected %d updates", len(updates))
    return resolve_selection(updates, manifest, out)
