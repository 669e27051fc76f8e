"""Review display: the all-good report and the dependency selection prompt."""

import logging

from rich.console import Console
from rich.text import Text

from .labels import category_label, colorize_diff, get_sort_key
from .models import ManifestDocument, ReviewModel, UpdateChoice
from .prompt import CheckboxPrompt, Choice, PromptEntry, Prompter, Separator
from .table import render_table
from .ui import console as default_console
from .ui import success_message

logger = logging.getLogger(__name__)

# Question line, blank line under it and the prompt's own echo
PROMPT_CHROME_LINES = 4
UNBOUNDED_PAGE_SIZE = 9999


def show_all_good(model: ReviewModel, console: Console | None = None) -> None:
    """Print one success line per category, blank lines in between."""
    out = console or default_console
    for position, key in enumerate(model.not_latest.keys):
        if position:
            out.print()
        out.print(success_message(category_label(key)))


def header_row(key: str, pending: int) -> list[Text]:
    label = category_label(key)
    if pending == 0:
        return [success_message(label)]
    return [
        Text(label, style="header.category"),
        Text("current", style="header.current"),
        Text("latest", style="header.latest"),
        Text(""),
    ]


def build_review_rows(model: ReviewModel) -> tuple[list[list[Text]], list[UpdateChoice | None]]:
    """Lay out header and body rows for every category.

    Returns:
        The table rows, and for each row either the update it selects or None
        for category headers
    """
    rows: list[list[Text]] = []
    targets: list[UpdateChoice | None] = []

    for key, deps in model.not_latest.items():
        rows.append(header_row(key, len(deps)))
        targets.append(None)

        # sorted() is stable, so equal severities keep mapping order
        for package_name in sorted(deps, key=lambda name: get_sort_key(deps[name])):
            analysis = deps[package_name]
            rows.append([
                Text(package_name),
                Text(analysis.current or ""),
                Text(analysis.latest or ""),
                colorize_diff(analysis.diff),
            ])
            targets.append(UpdateChoice(
                category_key=key,
                package_name=package_name,
                latest_range=analysis.latest_range,
            ))

    return rows, targets


def control_legend() -> Text:
    return Text.assemble(
        "Press ", ("Space", "key"), " to select, ",
        ("Enter", "key"), " to finish, or ",
        ("Control-C", "key"), " to cancel.",
    )


def build_choices(model: ReviewModel) -> list[PromptEntry]:
    """Convert the review table into prompt entries."""
    rows, targets = build_review_rows(model)
    lines = render_table(rows)

    choices: list[PromptEntry] = []
    for line, target in zip(lines, targets):
        if target is None:
            choices.append(Separator(Text(" ")))
            choices.append(Separator(Text("  ") + line))
        else:
            choices.append(Choice(title=line, value=target, short=target.package_name))

    choices.append(Separator(Text(" ")))
    choices.append(Separator(control_legend()))
    return choices


def page_size_for(terminal_height: int | None, errors_count: int) -> int:
    """Rows of the prompt shown at once, leaving printed diagnostics in view."""
    return max(1, (terminal_height or UNBOUNDED_PAGE_SIZE) - errors_count - PROMPT_CHROME_LINES)


def show_prompt(
    model: ReviewModel,
    manifest: ManifestDocument,
    prompter: Prompter | None = None,
    terminal_height: int | None = None,
) -> list[UpdateChoice]:
    """Ask the operator which dependencies to update.

    Raises:
        PromptCancelled: propagated from the prompter
    """
    prompter = prompter or CheckboxPrompt()
    page_size = page_size_for(terminal_height, model.errors_count)
    logger.debug("Review prompt page size: %d", page_size)

    return prompter.select(
        f"Select dependencies to update in {manifest.relative_path}",
        build_choices(model),
        page_size,
    )
